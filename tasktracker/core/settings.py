# tasktracker/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from pydantic import field_validator

class Settings(BaseSettings):
    """
    Application settings. Values come from the environment or `.env`.
    """
    # Database
    DATABASE_URL: str = "sqlite:///./tasktracker.db"

    # JWT / Security
    SECRET_KEY: str = "change-me-in-production"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Listing
    DEFAULT_LIST_LIMIT: int = 100
    MAX_LIST_LIMIT: int = 500

    # Seed accounts (used by tasktracker.seed); comma-separated member emails
    SEED_LEAD_EMAIL: str = "lead@example.com"
    SEED_MEMBER_EMAILS: str = "alice@example.com,bob@example.com"
    SEED_PASSWORD: str = "password123"

    # App meta
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    # comma-separated
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:8000"

    @field_validator("DEFAULT_LIST_LIMIT", "MAX_LIST_LIMIT")
    @classmethod
    def positive_limit(cls, v):
        if v < 1:
            raise ValueError("list limits must be positive")
        return v

    @staticmethod
    def _split(value: str) -> List[str]:
        return [i.strip() for i in value.split(",") if i.strip()]

    @property
    def allowed_origins(self) -> List[str]:
        return self._split(self.ALLOWED_ORIGINS)

    @property
    def seed_member_emails(self) -> List[str]:
        return self._split(self.SEED_MEMBER_EMAILS)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

settings = Settings()
