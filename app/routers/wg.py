import logging
from typing import Annotated, Literal, Union

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from app.deps.auth import get_current_user
from app.deps.status import get_timer
from app.services.dump import DumpCommand, get_dump_command
from app.services.status.errors import WgStatusError
from app.services.status.models import RemotePeer
from app.services.status.status import get_interfaces, get_status
from app.services.status.timer import Timer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["wg"])


class LocalPeerOut(BaseModel):
    kind: Literal["local"] = "local"
    public_key: str
    local_port: int
    persistent_keepalive: bool


PeerOut = Annotated[Union[LocalPeerOut, RemotePeer], Field(discriminator="kind")]


@router.get("/status", response_class=PlainTextResponse)
def status(
    command: DumpCommand = Depends(get_dump_command),
    timer: Timer = Depends(get_timer),
    user=Depends(get_current_user),
):
    """
    Текстовый статус всех интерфейсов WireGuard
    """
    try:
        return get_status(command, timer)
    except WgStatusError as e:
        logger.error("status failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/interfaces", response_model=dict[str, list[PeerOut]])
def interfaces(
    command: DumpCommand = Depends(get_dump_command),
    user=Depends(get_current_user),
):
    """
    Интерфейсы и их пиры в JSON (без приватных ключей)
    """
    try:
        return get_interfaces(command)
    except WgStatusError as e:
        logger.error("interfaces failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
