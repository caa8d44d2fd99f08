import time
from typing import Any, Dict

import jwt

from app.core.config import settings

ACCESS = "access"
REFRESH = "refresh"


def _now() -> int:
    return int(time.time())


def _encode(sub: str, token_type: str, ttl: int, **claims: Any) -> str:
    now = _now()
    payload = {
        "sub": sub,
        "iat": now,
        "nbf": now - 5,
        "exp": now + ttl,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": token_type,
        **claims,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def create_access_token(sub: str, roles: list[str] | None = None) -> str:
    return _encode(sub, ACCESS, settings.JWT_ACCESS_TTL, roles=roles or [])


def create_refresh_token(sub: str, roles: list[str] | None = None) -> str:
    # роли переносятся в refresh, чтобы не терять их при обновлении пары
    return _encode(sub, REFRESH, settings.JWT_REFRESH_TTL, roles=roles or [])


def decode_token(token: str, token_type: str | None = None) -> Dict[str, Any]:
    """
    Проверяет подпись, срок действия, issuer и audience.
    Если передан token_type - ещё и тип токена.
    """
    payload = jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
        issuer=settings.JWT_ISSUER,
    )
    if token_type is not None and payload.get("type") != token_type:
        raise jwt.InvalidTokenError(f"expected {token_type} token")
    return payload
