import enum
import logging

from app.services.dump import DumpCommand
from app.services.status.errors import WgStatusError
from app.services.status.status import get_status
from app.services.status.timer import Timer

logger = logging.getLogger(__name__)

HEADER = "These commands are supported:"


class Command(enum.Enum):
    HELP = ("help", "display this text.")
    STATUS = ("status", "Status for all Wireguard interfaces.")

    def __init__(self, command: str, description: str):
        self.command = command
        self.description = description


def descriptions() -> str:
    lines = [HEADER]
    lines += [f"/{c.command} — {c.description}" for c in Command]
    return "\n".join(lines)


def parse_command(text: str) -> Command | None:
    """
    "/status", "status", "/status@SomeBot" -> Command.STATUS.
    Всё остальное - не команда.
    """
    words = text.strip().split()
    if not words:
        return None

    name = words[0].lstrip("/").split("@", 1)[0].lower()
    for command in Command:
        if command.command == name:
            return command
    return None


def status_reply(dump_command: DumpCommand, timer: Timer) -> str:
    try:
        return get_status(dump_command, timer)
    except WgStatusError as e:
        logger.warning("status failed: %s", e)
        return f"Error found: {e}"


def answer(text: str | None, dump_command: DumpCommand, timer: Timer) -> str | None:
    """
    Ответ на текстовую команду или None, если отвечать не нужно.
    """
    if not text:
        return None

    command = parse_command(text)
    if command is Command.HELP:
        return descriptions()
    if command is Command.STATUS:
        return status_reply(dump_command, timer)
    return None
