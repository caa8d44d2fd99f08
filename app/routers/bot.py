from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.deps.auth import get_current_user
from app.deps.status import get_timer
from app.services.commands import answer
from app.services.dump import DumpCommand, get_dump_command
from app.services.status.timer import Timer

router = APIRouter(tags=["bot"])


class CommandRequest(BaseModel):
    text: str | None = None


class CommandReply(BaseModel):
    reply: str | None = None


@router.post("/command", response_model=CommandReply)
def command(
    request: CommandRequest,
    dump_command: DumpCommand = Depends(get_dump_command),
    timer: Timer = Depends(get_timer),
    user=Depends(get_current_user),
):
    """
    Текстовые команды бота: /help, /status
    """
    return CommandReply(reply=answer(request.text, dump_command, timer))
