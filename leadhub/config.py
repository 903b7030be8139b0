import os
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv
from fastapi.security import HTTPBearer

from leadhub.utils.durations import parse_duration

BASE_DIR = Path(__file__).resolve().parent.parent  # -> project root

# Load .env explicitly from project root
load_dotenv(BASE_DIR / ".env")


class Settings:
    PROJECT_NAME = "LeadHub Backend"

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./leadhub.db")

    JWT_SECRET = os.getenv("JWT_SECRET")
    ALGORITHM = os.getenv("ALGORITHM", "HS256")
    JWT_EXPIRES_IN = os.getenv("JWT_EXPIRES_IN", "7d")
    TOKEN_COOKIE_NAME = "token"

    APP_ENV = os.getenv("APP_ENV") or os.getenv("NODE_ENV", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    bearer_scheme = HTTPBearer(auto_error=False)
    cors_origins = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    def __init__(self):
        # Token and cookie share this lifetime.
        self.token_lifetime: timedelta = parse_duration(self.JWT_EXPIRES_IN)

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower() == "production"


settings = Settings()
