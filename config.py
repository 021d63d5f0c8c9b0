"""
Environment configuration for the School ERP finance service.
Values come from environment variables (or a local .env file).
"""
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env if present
load_dotenv(dotenv_path=Path('.') / '.env')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # --- APPLICATION ---
    APP_NAME: str = "Digital School ERP"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # --- DATABASE ---
    DATABASE_URL: str = "sqlite:///./school.db"
    DB_ECHO: bool = False

    # --- CORS ---
    # Comma separated
    CORS_ORIGINS: str = "http://localhost:3000"

    # --- LOGGING ---
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # --- AUTH COOKIE ---
    # Cookie value the admin login hands out
    ADMIN_TOKEN: str = "admin_access"

    @field_validator("LOG_LEVEL")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
