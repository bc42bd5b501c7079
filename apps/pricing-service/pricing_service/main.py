from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from pricing_service import models  # noqa: F401
from pricing_service.core.config import settings
from pricing_service.db.seed import seed_prices
from pricing_service.db.session import SessionLocal, engine
from pricing_service.models.base import Base
from pricing_service.routes.prices import router as prices_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "pricing-service"


def _init_db() -> None:
    # DEV ONLY: production schemas come from alembic
    if settings.RUN_CREATE_ALL:
        Base.metadata.create_all(bind=engine)
        logger.info("DB tables ensured via create_all (RUN_CREATE_ALL=1).")

    if settings.SEED_PRICES:
        db = SessionLocal()
        try:
            seed_prices(
                db,
                vehicle_count=settings.SEED_VEHICLE_COUNT,
                random_seed=settings.SEED_RANDOM_SEED,
            )
        finally:
            db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s", SERVICE_NAME)
    try:
        _init_db()
    except SQLAlchemyError:
        logger.exception("Database initialization failed; continuing startup without it.")
    yield
    logger.info("Shutting down %s", SERVICE_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)


@app.api_route("/", methods=["GET", "HEAD"], status_code=status.HTTP_200_OK)
def root():
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": settings.APP_VERSION,
    }


@app.api_route("/health", methods=["GET", "HEAD"], status_code=status.HTTP_200_OK)
def health_check():
    """Health check endpoint for uptime monitoring."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError:
        logger.warning("Health check could not reach the database", exc_info=True)
        database = "disconnected"

    return {
        "status": "ok" if database == "connected" else "error",
        "service": SERVICE_NAME,
        "version": settings.APP_VERSION,
        "database": database,
    }


app.include_router(prices_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("pricing_service.main:app", host=settings.HOST, port=settings.PORT)
