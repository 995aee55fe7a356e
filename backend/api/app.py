"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from .errors import register_exception_handlers
from .routes import health
from modules.auth.routes import router as auth_router
from modules.books.routes import router as books_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = app.state.settings
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    if settings.uses_insecure_secret:
        logger.warning(
            "JWT_SECRET is not set; tokens are signed with the development "
            "default and can be forged. Set JWT_SECRET for production use."
        )
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app with. Defaults to the
            process-wide settings loaded from the environment.

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Personal book list with email/password accounts",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.state.settings = settings
    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(books_router, prefix="/books", tags=["books"])

    return app


# Application instance for uvicorn
app = create_app()
