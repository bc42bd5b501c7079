# vehicles_api/core/config.py
# - Reads env vars from ".env" if present (pydantic-settings).

from __future__ import annotations

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Vehicles API"
    APP_VERSION: str = "1.0.0"

    DATABASE_URL: str = "sqlite:///./vehicles.db"

    # Downstream services
    PRICING_ENDPOINT: str = "http://localhost:8082"
    MAPS_ENDPOINT: Optional[str] = None
    HTTP_TIMEOUT_SECONDS: float = 5.0

    FRONTEND_URL: Optional[str] = None
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # DEV ONLY: create tables on startup instead of running alembic
    RUN_CREATE_ALL: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("DATABASE_URL")
    @classmethod
    def _normalize_postgres_scheme(cls, v: str) -> str:
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    @field_validator("PRICING_ENDPOINT", "MAPS_ENDPOINT")
    @classmethod
    def _strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip().rstrip("/")
        return v or None


settings = Settings()
