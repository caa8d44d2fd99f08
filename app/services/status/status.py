import logging

from app.core.config import settings
from app.services.dump import DumpCommand

from .models import InterfaceMap
from .parser import parse_dump
from .renderer import render_status
from .timer import Timer

logger = logging.getLogger(__name__)


def get_interfaces(command: DumpCommand) -> InterfaceMap:
    raw = command.execute_dump()
    interfaces = parse_dump(raw)
    logger.debug(
        "parsed %d interface(s), %d peer(s)",
        len(interfaces),
        sum(len(peers) for peers in interfaces.values()),
    )
    return interfaces


def get_status(command: DumpCommand, timer: Timer, max_handshake: int | None = None) -> str:
    """
    dump -> разбор -> текст статуса для всех интерфейсов.
    """
    if max_handshake is None:
        max_handshake = settings.MAX_HANDSHAKE
    return render_status(get_interfaces(command), timer, max_handshake)
