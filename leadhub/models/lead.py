from sqlalchemy import Column, DateTime, Integer, String

from leadhub.database import Base
from leadhub.utils.timezone import display_wall_clock


class Lead(Base):
    """Marketing copy of the profile captured at registration. Not linked to users."""

    __tablename__ = "leads"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, index=True, nullable=False)
    phone = Column(String, nullable=False)
    course = Column(String, nullable=False)
    university = Column(String, nullable=False)
    qualification = Column(String, nullable=False)
    experience = Column(String, nullable=False)
    created_at = Column(DateTime, default=display_wall_clock, nullable=False)
