from datetime import datetime

from pydantic import BaseModel

from leadhub.schemas.user import FORM_CONFIG


class GeneralLeadCreate(BaseModel):
    model_config = FORM_CONFIG

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    message: str | None = None


class DemoCreate(BaseModel):
    model_config = FORM_CONFIG

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    city: str | None = None
    course: str | None = None
    # Checked against the allowed values by the demos table, not here
    type: str | None = None


class EnquiryCreate(BaseModel):
    model_config = FORM_CONFIG

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    course: str | None = None
    university: str | None = None
    message: str | None = None


class EnquiryResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    course: str | None
    university: str | None
    message: str | None
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}
