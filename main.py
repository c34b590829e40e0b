import logging
import threading
import time
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import init_db
from app.core.logging_config import setup_logging
from app.api.endpoints import interests, health
from app.services.interest_client import InterestClient
from app.services.startup_runner import run_startup_sequence

setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info(f"Starting up {settings.PROJECT_NAME}...")
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="CRUD repository for interest records",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(interests.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint - service banner"""
    return {
        "message": settings.PROJECT_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }


def _run_when_started(server, failed: Optional[threading.Event] = None) -> None:
    """
    Wait for uvicorn to accept connections, then run the startup sequence once.

    A failing sequence asks the server to exit and re-raises, so the
    process stops instead of serving with the sequence half done.
    """
    while not server.started:
        if server.should_exit:
            return
        time.sleep(0.1)

    try:
        with InterestClient(settings.CLIENT_BASE_URL) as client:
            run_startup_sequence(client)
    except BaseException:
        logger.error("Startup sequence failed, shutting down")
        if failed is not None:
            failed.set()
        server.should_exit = True
        raise


if __name__ == "__main__":
    import sys
    import uvicorn

    server = uvicorn.Server(uvicorn.Config(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower()
    ))

    startup_failed = threading.Event()
    if settings.RUN_STARTUP_SEQUENCE:
        threading.Thread(target=_run_when_started, args=(server, startup_failed), daemon=True).start()

    server.run()

    if startup_failed.is_set():
        sys.exit(1)
