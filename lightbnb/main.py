"""
FastAPI application exposing the database health probe.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from lightbnb.core import database
from lightbnb.core.config import settings
from lightbnb.routers import health

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up...")
    yield  # Control returns to the application during runtime
    logger.info("Disposing database connection pool...")
    await database.async_engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Data-access layer for the LightBnB property rental app",
    version="0.1.0",
    openapi_url="/openapi.json",
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Include routers
app.include_router(health.router, prefix="/health", tags=["HealthCheck"])
