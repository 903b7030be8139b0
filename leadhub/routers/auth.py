import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from leadhub.database import get_db
from leadhub.models.lead import Lead
from leadhub.models.user import User
from leadhub.schemas.user import LoginRequest, RegisterRequest, UserResponse, UserSummary
from leadhub.services.auth_middleware import get_current_user
from leadhub.services.auth_service import clear_token_cookie, create_access_token, set_token_cookie
from leadhub.services.password_service import hash_password, verify_password
from leadhub.services.validation import require_fields
from leadhub.utils.errors import AuthError, ConflictError, ForbiddenError
from leadhub.utils.response import create_response, handle_exception
from leadhub.utils.timezone import display_now, display_wall_clock, format_display_time

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])

DUPLICATE_EMAIL_MESSAGE = "Email is already registered"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"
DEACTIVATED_MESSAGE = "Account is deactivated. Please contact support."


def _user_summary(user: User) -> dict:
    return UserSummary.model_validate(user).model_dump()


@router.post("/register")
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    try:
        existing = db.query(User).filter(User.email == body.email).first()
        if existing:
            logger.warning("Registration rejected, email already registered: %s", body.email)
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

        created_at = display_wall_clock()
        profile = body.model_dump(exclude={"password"})

        user = User(**profile, password_hash=hash_password(body.password), created_at=created_at)
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            db.rollback()
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)
        db.refresh(user)

        # Separate write: a failure here leaves the user without a lead
        lead = Lead(**profile, created_at=created_at)
        db.add(lead)
        db.commit()

        logger.info("Registered user id=%s and captured lead id=%s", user.id, lead.id)
        return create_response(
            message="User registered and lead captured",
            status_code=status.HTTP_201_CREATED,
            user=UserResponse.model_validate(user).model_dump(),
        )
    except Exception as exc:
        return handle_exception(exc, "Server error", db)


@router.post("/login")
def login(body: LoginRequest, db: Session = Depends(get_db)):
    try:
        require_fields(body, ("email", "password"), "Email and password are required")

        user = db.query(User).filter(User.email == body.email).first()
        if not user:
            logger.warning("Login failed for unknown email")
            raise AuthError(INVALID_CREDENTIALS_MESSAGE)

        if not user.active:
            logger.warning("Login refused for deactivated user id=%s", user.id)
            raise ForbiddenError(DEACTIVATED_MESSAGE)

        if not verify_password(body.password, user.password_hash):
            logger.warning("Login failed for user id=%s", user.id)
            raise AuthError(INVALID_CREDENTIALS_MESSAGE)

        user.last_login = display_wall_clock()
        db.commit()
        db.refresh(user)

        token = create_access_token({"id": user.id})
        response = create_response(
            message="Login successful",
            token=token,
            user=_user_summary(user),
        )
        set_token_cookie(response, token)
        logger.info("User id=%s logged in", user.id)
        return response
    except Exception as exc:
        return handle_exception(exc, "Server error during login", db)


@router.post("/logout")
def logout():
    response = create_response(
        message="Logged out",
        logoutAt=format_display_time(display_now()),
    )
    clear_token_cookie(response)
    return response


@router.get("/me")
def me(current_user: User = Depends(get_current_user)):
    try:
        return create_response(
            message="Profile fetched successfully",
            user=_user_summary(current_user),
        )
    except Exception as exc:
        return handle_exception(exc)
