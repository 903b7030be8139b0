import logging

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from sqlalchemy.orm import Session

from leadhub.utils.errors import ValidationError

logger = logging.getLogger(__name__)


def create_response(
    message: str | None = None,
    status_code: int = status.HTTP_200_OK,
    **fields,
) -> JSONResponse:
    """Return the shared ``{success, message, ...}`` envelope with ``fields`` merged in."""
    content = {"success": status_code < 400}
    if message is not None:
        content["message"] = message
    content.update(jsonable_encoder(fields))
    return JSONResponse(status_code=status_code, content=content)


def handle_exception(
    error: Exception,
    fallback_message: str = "Server error",
    db: Session | None = None,
) -> JSONResponse:
    """Coerce raised errors into the shared response structure."""
    if isinstance(error, ValidationError):
        return create_response(error.detail, error.status_code, errors=error.errors)

    if isinstance(error, HTTPException):
        detail = error.detail if isinstance(error.detail, str) else str(error.detail)
        return create_response(detail, error.status_code)

    if db is not None:
        db.rollback()
    logger.exception("%s: %s", fallback_message, error)
    return create_response(fallback_message, status.HTTP_500_INTERNAL_SERVER_ERROR)
