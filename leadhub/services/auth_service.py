import logging
from datetime import datetime, timezone

from fastapi import Response
from jose import jwt

from leadhub.config import settings
from leadhub.utils.errors import ServerError

logger = logging.getLogger(__name__)


def create_access_token(data: dict) -> str:
    if not settings.JWT_SECRET:
        raise ServerError("Token signing is not configured")
    issued_at = datetime.now(timezone.utc)
    payload = dict(data)
    payload.update({"iat": issued_at, "exp": issued_at + settings.token_lifetime})
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Verify signature and expiry. Raises ``jose.JWTError`` on failure."""
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.ALGORITHM])


def set_token_cookie(response: Response, token: str) -> None:
    production = settings.is_production
    response.set_cookie(
        key=settings.TOKEN_COOKIE_NAME,
        value=token,
        max_age=int(settings.token_lifetime.total_seconds()),
        httponly=True,
        secure=production,
        samesite="none" if production else "lax",
    )


def clear_token_cookie(response: Response) -> None:
    response.set_cookie(
        key=settings.TOKEN_COOKIE_NAME,
        value="",
        httponly=True,
        expires=datetime(1970, 1, 1, tzinfo=timezone.utc),
    )
