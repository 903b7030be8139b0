import logging

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session

from leadhub.config import settings
from leadhub.database import get_db
from leadhub.models.user import User
from leadhub.services.auth_service import decode_access_token
from leadhub.utils.errors import AuthError, ForbiddenError, ServerError

logger = logging.getLogger(__name__)


def _extract_token(request: Request, credentials: HTTPAuthorizationCredentials | None) -> str | None:
    token = request.cookies.get(settings.TOKEN_COOKIE_NAME)
    if token:
        return token
    if credentials:
        return credentials.credentials
    return None


def _get_user_from_token(token: str | None, db: Session) -> User:
    if not token:
        raise AuthError("Not authenticated")
    try:
        payload = decode_access_token(token)
    except JWTError:
        raise AuthError("Invalid or expired token")

    user_id = payload.get("id")
    if user_id is None:
        raise AuthError("Invalid token payload")

    user = db.get(User, user_id)
    if not user:
        raise AuthError("User not found")
    if not user.active:
        raise ForbiddenError("Account is deactivated. Please contact support.")
    return user


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(settings.bearer_scheme),
    db: Session = Depends(get_db),
):
    token = _extract_token(request, credentials)
    try:
        return _get_user_from_token(token, db)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Failed to load user from token: %s", exc)
        raise ServerError()
