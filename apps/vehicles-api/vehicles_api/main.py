from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from vehicles_api import models  # noqa: F401
from vehicles_api.core.config import settings
from vehicles_api.db.session import engine
from vehicles_api.dependencies.services import close_clients
from vehicles_api.models.base import Base
from vehicles_api.routes.cars import router as cars_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "vehicles-api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s", SERVICE_NAME)
    # ============================================================
    # DB table creation (DEV ONLY)
    # - In production, run the alembic migrations instead.
    # - Guarded so a transient DB outage doesn't prevent startup.
    # ============================================================
    if settings.RUN_CREATE_ALL:
        try:
            Base.metadata.create_all(bind=engine)
            logger.info("DB tables ensured via create_all (RUN_CREATE_ALL=1).")
        except SQLAlchemyError:
            logger.exception("Base.metadata.create_all failed; continuing startup without it.")
    yield
    close_clients()
    logger.info("Shutting down %s", SERVICE_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# ============================================================
# CORS
# - localhost for dev, FRONTEND_URL for production.
# ============================================================
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
if settings.FRONTEND_URL and settings.FRONTEND_URL.strip():
    origins.append(settings.FRONTEND_URL.strip())

app.add_middleware(
    CORSMiddleware,
    allow_origins=sorted(set(origins)),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
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


app.include_router(cars_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("vehicles_api.main:app", host=settings.HOST, port=settings.PORT)
