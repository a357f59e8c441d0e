"""
Main FastAPI application for the chat relay service.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api import api_router
from .config import Settings, settings
from .deps import get_relay_service
from .models.schemas import HealthCheckResponse
from .services.relay_service import RelayService
from .util.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


def mount_ui(app: FastAPI, dist_dir: str) -> bool:
    """Serve a prebuilt UI bundle at "/" if the directory exists."""
    path = Path(dist_dir)
    if not path.is_dir():
        logger.info(f"UI bundle not found at {path}, serving API only")
        return False
    app.mount("/", StaticFiles(directory=str(path), html=True), name="static")
    logger.info(f"Mounted UI bundle from {path}")
    return True


def create_app(config: Settings = settings) -> FastAPI:
    """Build the relay application for the given settings."""

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        logger.info("Starting Chat Relay Service...")
        if config.validate_config(strict=False):
            logger.info("Configuration validated successfully")
        logger.info(f"Configuration: {config.get_config_summary()}")
        yield
        logger.info("Shutting down Chat Relay Service...")

    app = FastAPI(
        title="Chat Relay Service",
        description="Forwards chat messages to Google Gen AI and returns the reply",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.relay_service = RelayService(config=config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(service: RelayService = Depends(get_relay_service)):
        """Health check endpoint."""
        return HealthCheckResponse(**service.check_health())

    # Mounted last so /api and /health keep priority over the catch-all.
    mount_ui(app, config.UI_DIST_DIR)
    return app


app = create_app()
