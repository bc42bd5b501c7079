# pricing_service/core/config.py
# - Reads env vars from ".env" if present (pydantic-settings).

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Pricing Service"
    APP_VERSION: str = "1.0.0"

    DATABASE_URL: str = "sqlite:///./pricing.db"

    # Demo data inserted at startup when the prices table is empty
    SEED_PRICES: bool = True
    SEED_VEHICLE_COUNT: int = 20
    SEED_RANDOM_SEED: int = 42

    HOST: str = "0.0.0.0"
    PORT: int = 8082
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


settings = Settings()
