"""FastAPI application setup for the city weather gateway."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api import get_weather_service, router as api_router
from .config import settings
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="app/main")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Configure logging and build the OpenWeather services before serving."""
    setup_logging(level=settings.log_level)
    get_weather_service()
    logger.info("City weather gateway started")
    yield


app = FastAPI(title="City Weather Gateway", lifespan=lifespan)


@app.get("/health")
def health():
    """Liveness probe."""
    return {"status": "ok"}


app.include_router(api_router, prefix="/api")
