from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

U16_MAX = 2**16 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


class LocalPeer(BaseModel):
    """
    Собственная запись интерфейса: ключи и порт, на котором он слушает.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["local"] = "local"
    public_key: str
    private_key: str = Field(repr=False)
    local_port: int = Field(ge=0, le=U16_MAX)
    persistent_keepalive: bool


class RemotePeer(BaseModel):
    """
    Подключённый пир: адрес, счётчики трафика и время последнего handshake.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["remote"] = "remote"
    public_key: str
    remote_address: str | None = None
    remote_port: int | None = Field(default=None, ge=0, le=U16_MAX)
    allowed_ips: str
    # Unix epoch в секундах, 0 - handshake ещё не было
    latest_handshake: int = Field(ge=0)
    sent_bytes: int = Field(ge=0)
    received_bytes: int = Field(ge=0)
    persistent_keepalive: bool

    @field_validator("latest_handshake")
    @classmethod
    def fits_u64(cls, value: int) -> int:
        if value > U64_MAX:
            raise ValueError("latest_handshake does not fit in 64 bits")
        return value

    @field_validator("sent_bytes", "received_bytes")
    @classmethod
    def fits_u128(cls, value: int) -> int:
        if value > U128_MAX:
            raise ValueError("counter does not fit in 128 bits")
        return value

    @model_validator(mode="after")
    def port_requires_address(self):
        if (self.remote_address is None) != (self.remote_port is None):
            raise ValueError("remote_port must be set together with remote_address")
        return self


Peer = Annotated[Union[LocalPeer, RemotePeer], Field(discriminator="kind")]

InterfaceMap = dict[str, list[Peer]]
