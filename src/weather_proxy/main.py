"""Main FastAPI application for weather proxy service."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI

from weather_proxy.api.endpoints import router as weather_router
from weather_proxy.config import HOST, PORT, DEBUG, OWM_API_KEY
from weather_proxy.logging_config import configure_logging

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    if not OWM_API_KEY:
        logger.error("Startup error: OWM_API_KEY is not set")
        raise RuntimeError("OWM_API_KEY must be set to start the weather proxy")

    logger.info("Starting Weather Proxy Service")
    try:
        yield
    finally:
        logger.info("Shutting down Weather Proxy Service")


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Weather Proxy Service",
        description="Serves a simplified summary of OpenWeatherMap current conditions",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan
    )

    app.include_router(weather_router)

    return app


# Create app instance for uvicorn
app = create_app()


def main() -> None:
    """Main entry point for the application."""
    logger.info(f"Starting server on {HOST}:{PORT}")
    uvicorn.run(
        app,
        host=HOST,
        port=PORT,
        log_level="info" if not DEBUG else "debug"
    )


if __name__ == "__main__":
    main()
