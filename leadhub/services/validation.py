from collections.abc import Iterable, Sequence

from pydantic import BaseModel

from leadhub.utils.errors import ValidationError


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def missing_fields(body: BaseModel, required: Iterable[str]) -> list[dict]:
    """Return one ``{field, message}`` entry per required field that is absent or blank."""
    return [
        {"field": field, "message": f"{field} is required"}
        for field in required
        if _is_blank(getattr(body, field, None))
    ]


def require_fields(body: BaseModel, required: Iterable[str], message: str) -> None:
    errors = missing_fields(body, required)
    if errors:
        raise ValidationError(message, errors)


def errors_from_request(raw_errors: Sequence[dict]) -> list[dict]:
    """Flatten FastAPI/pydantic validation errors into ``{field, message}`` entries."""
    errors = []
    for error in raw_errors:
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        errors.append(
            {
                "field": ".".join(location) or "body",
                "message": error.get("msg", "Invalid value"),
            }
        )
    return errors
