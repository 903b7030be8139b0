from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from leadhub.database import Base


class GeneralLead(Base):
    __tablename__ = "general_leads"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
