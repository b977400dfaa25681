"""
FastAPI application factory.

Creates and configures the FastAPI application instance and runs the
weekly reminder scheduler for the lifetime of the process.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.api.v1.router import api_router
from app.db.init_db import init_db

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables, start the reminder scheduler, stop it on shutdown."""
    logger.info(f"{settings.PROJECT_NAME} v{settings.VERSION} starting")
    init_db()

    reminder_scheduler = None
    if settings.NOTIFICATIONS_ENABLED:
        from app.notifications.scheduler import ReminderScheduler

        if not settings.VAPID_PRIVATE_KEY:
            logger.warning("VAPID_PRIVATE_KEY not set: reminder ticks will be skipped")
        reminder_scheduler = ReminderScheduler()
        reminder_scheduler.start()

    yield

    if reminder_scheduler is not None:
        await reminder_scheduler.shutdown()
    logger.info(f"{settings.PROJECT_NAME} stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Weekly health, fitness and cognition tracking with a compounding longevity score.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan)

# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Health Balance API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "health-balance-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL
    }
