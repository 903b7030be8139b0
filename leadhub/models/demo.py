from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, Integer, String
from sqlalchemy.orm import validates

from leadhub.database import Base

DEMO_TYPES = ("video", "home")


class Demo(Base):
    __tablename__ = "demos"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    city = Column(String, nullable=False)
    course = Column(String, nullable=False)
    # validate_strings rejects anything else when the row is flushed
    type = Column(
        Enum(*DEMO_TYPES, name="demo_type", create_constraint=True, validate_strings=True),
        nullable=False,
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    @validates("name", "phone", "city", "course")
    def _strip(self, key, value):
        return value.strip() if isinstance(value, str) else value

    @validates("email")
    def _normalize_email(self, key, value):
        return value.strip().lower() if isinstance(value, str) else value

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "city": self.city,
            "course": self.course,
            "type": self.type,
            "createdAt": self.created_at,
        }
