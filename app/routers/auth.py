import jwt
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.core.config import settings
from app.utils.jwt import REFRESH, create_access_token, create_refresh_token, decode_token

router = APIRouter(tags=["auth"])


class RefreshRequest(BaseModel):
    refresh_token: str


class LoginRequest(BaseModel):
    username: str
    password: str


class TokenPair(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


def _issue_pair(sub: str, roles: list[str]) -> TokenPair:
    return TokenPair(
        access_token=create_access_token(sub=sub, roles=roles),
        refresh_token=create_refresh_token(sub=sub, roles=roles),
    )


@router.post("/login", response_model=TokenPair)
def login(req: LoginRequest):
    if (
        req.username != settings.ADMIN_USERNAME
        or req.password != settings.ADMIN_PASSWORD
    ):
        raise HTTPException(status_code=401, detail="Неверные учетные данные")
    return _issue_pair(req.username, ["admin"])


@router.post("/refresh", response_model=TokenPair)
def refresh(req: RefreshRequest):
    try:
        payload = decode_token(req.refresh_token, token_type=REFRESH)
    except jwt.PyJWTError:
        raise HTTPException(status_code=401, detail="Неверный или просроченный refresh-токен")
    return _issue_pair(payload["sub"], payload.get("roles", []))
