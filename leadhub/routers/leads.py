import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from leadhub.database import get_db
from leadhub.models.demo import Demo
from leadhub.models.enquiry import Enquiry
from leadhub.models.general_lead import GeneralLead
from leadhub.schemas.leads import DemoCreate, EnquiryCreate, EnquiryResponse, GeneralLeadCreate
from leadhub.services.validation import require_fields
from leadhub.utils.response import create_response, handle_exception
from leadhub.utils.timezone import format_display_time

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Leads"])

GENERAL_LEAD_FIELDS = ("name", "email", "phone", "message")
DEMO_FIELDS = ("name", "email", "phone", "city", "course", "type")
ENQUIRY_FIELDS = ("name", "email", "phone")


@router.post("/leads/general")
def create_general_lead(body: GeneralLeadCreate, db: Session = Depends(get_db)):
    try:
        require_fields(body, GENERAL_LEAD_FIELDS, "All fields are required")

        lead = GeneralLead(**body.model_dump(include=set(GENERAL_LEAD_FIELDS)))
        db.add(lead)
        db.commit()

        logger.info("General lead id=%s saved", lead.id)
        return create_response(
            message="Lead submitted successfully",
            status_code=status.HTTP_201_CREATED,
        )
    except Exception as exc:
        return handle_exception(exc, "Server error", db)


@router.post("/demo")
def create_demo_request(body: DemoCreate, db: Session = Depends(get_db)):
    try:
        require_fields(body, DEMO_FIELDS, "All fields are required")

        demo = Demo(**body.model_dump(include=set(DEMO_FIELDS)))
        db.add(demo)
        db.commit()
        db.refresh(demo)

        logger.info("Demo request id=%s saved type=%s", demo.id, demo.type)
        payload = demo.to_dict()
        payload["createdAtIST"] = format_display_time(demo.created_at)
        return create_response(
            message="Booking request submitted successfully",
            status_code=status.HTTP_201_CREATED,
            data=payload,
        )
    except Exception as exc:
        return handle_exception(exc, "Server error", db)


@router.post("/enquiry")
def create_enquiry(body: EnquiryCreate, db: Session = Depends(get_db)):
    try:
        require_fields(body, ENQUIRY_FIELDS, "Name, email, and phone are required")

        enquiry = Enquiry(**body.model_dump(), status="pending")
        db.add(enquiry)
        db.commit()
        db.refresh(enquiry)

        logger.info("Enquiry id=%s saved", enquiry.id)
        return create_response(
            message="Enquiry submitted successfully",
            status_code=status.HTTP_201_CREATED,
            enquiry=EnquiryResponse.model_validate(enquiry).model_dump(),
        )
    except Exception as exc:
        return handle_exception(exc, "Server error while saving enquiry", db)
