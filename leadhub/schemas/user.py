from datetime import datetime

from pydantic import BaseModel, EmailStr, field_validator

# Request bodies from the site's forms may send phone numbers as JSON numbers.
FORM_CONFIG = {"coerce_numbers_to_str": True}


def normalize_email(value: str | None) -> str | None:
    """Single lookup key for users: trimmed and lowercased."""
    if value is None:
        return None
    return value.strip().lower()


class RegisterRequest(BaseModel):
    name: str
    email: EmailStr
    phone: str
    course: str
    university: str
    qualification: str
    experience: str
    password: str

    model_config = FORM_CONFIG

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("name", "phone", "course", "university", "qualification", "experience")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < 6:
            raise ValueError("password must be at least 6 characters")
        return value


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None

    model_config = FORM_CONFIG

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        return normalize_email(value)


class UserSummary(BaseModel):
    id: int
    name: str
    email: EmailStr
    course: str
    university: str

    model_config = {"from_attributes": True}


class UserResponse(BaseModel):
    """Registration echo. ``password_hash`` is deliberately not a field."""

    id: int
    name: str
    email: EmailStr
    phone: str
    course: str
    university: str
    qualification: str
    experience: str
    active: bool
    last_login: datetime | None
    created_at: datetime

    model_config = {"from_attributes": True}
