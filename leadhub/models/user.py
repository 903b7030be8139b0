from sqlalchemy import Boolean, Column, DateTime, Integer, String

from leadhub.database import Base
from leadhub.utils.timezone import display_wall_clock


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    # Registration fields
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    phone = Column(String, nullable=False)
    course = Column(String, nullable=False)
    university = Column(String, nullable=False)
    qualification = Column(String, nullable=False)
    experience = Column(String, nullable=False)

    password_hash = Column(String, nullable=False)

    # Toggled by support staff, not by any endpoint
    active = Column(Boolean, default=True, nullable=False)

    # IST wall clock
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=display_wall_clock, nullable=False)
