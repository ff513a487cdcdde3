"""FastAPI application factory and main entry point."""

import os
import subprocess
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.logging import get_logger, setup_logging
from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail
from app.newsletter.infrastructure.db.session import dispose_engine
from app.newsletter.infrastructure.external.email_client import EmailClient
from app.newsletter.presentation.api import health, subscriptions

settings = get_settings()
logger = get_logger(__name__)


def run_migrations() -> bool:
    """Run ``alembic upgrade head`` from the backend directory.

    Returns:
        True if the migrations completed.
    """
    backend_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    alembic_ini_path = os.path.join(backend_dir, "alembic.ini")

    if not os.path.exists(alembic_ini_path):
        logger.warning(f"alembic.ini not found at {alembic_ini_path}, skipping migrations")
        return False

    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
        capture_output=True,
        text=True,
        timeout=60,
    )
    if result.returncode != 0:
        logger.error(f"Migration failed: {result.stderr}")
        return False

    logger.info("Database migrations completed")
    if result.stdout:
        logger.debug(f"Migration output: {result.stdout}")
    return True


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    # Startup
    setup_logging(level="DEBUG" if settings.debug else "INFO")
    logger.info("Newsletter service starting up...")
    logger.info(f"Environment: {settings.app_env}")

    if settings.is_production:
        logger.info("Running database migrations...")
        run_migrations()

    # The sender address is validated once, here
    app.state.email_sender = EmailClient(
        base_url=settings.email_base_url,
        sender=SubscriberEmail.parse(settings.email_sender),
        authorization_token=settings.email_authorization_token,
        timeout=settings.email_timeout_seconds,
    )

    yield

    # Shutdown
    logger.info("Newsletter service shutting down...")
    await app.state.email_sender.close()
    await dispose_engine()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Newsletter",
        description="Newsletter subscriptions with email confirmation",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(subscriptions.router, tags=["Subscriptions"])

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.is_development,
    )
