from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from leadhub.database import Base


class Enquiry(Base):
    __tablename__ = "enquiries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    course = Column(String, nullable=True)
    university = Column(String, nullable=True)
    message = Column(Text, nullable=True)
    # Follow-up tracking
    status = Column(String, default="pending", nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
