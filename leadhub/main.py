import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from leadhub.config import settings
from leadhub.database import Base, engine
from leadhub.models import demo, enquiry, general_lead, lead, user  # noqa: F401  (register tables)
from leadhub.routers import auth, leads
from leadhub.services.validation import errors_from_request
from leadhub.utils.response import create_response, handle_exception

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)

# Auto create tables
Base.metadata.create_all(bind=engine)

# CORS for the marketing site; cookies need credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    if not settings.JWT_SECRET:
        raise RuntimeError("JWT_SECRET must be set")
    logger.info(
        "%s starting env=%s token_lifetime=%s",
        settings.PROJECT_NAME,
        settings.APP_ENV,
        settings.token_lifetime,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return create_response(
        "Validation failed",
        status.HTTP_400_BAD_REQUEST,
        errors=errors_from_request(exc.errors()),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return handle_exception(exc)


# Add routes
app.include_router(auth.router)
app.include_router(leads.router)


@app.get("/")
def home():
    try:
        return create_response(
            message="LeadHub API running",
            service="leadhub-backend",
        )
    except Exception as exc:
        return handle_exception(exc)
