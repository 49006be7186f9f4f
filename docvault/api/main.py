"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, uvicorn, docvault.api.routers, docvault.observability
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docvault import __version__
from docvault.api.deps.dependencies import ServiceContainer
from docvault.api.error_handlers import register_error_handlers
from docvault.configs import Settings, get_settings
from docvault.observability import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)

from .routers import (
    auth_protected_router,
    auth_router,
    documents_router,
    health_router,
    productions_router,
    status_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds the service container on startup and disposes of it on shutdown.
    A missing JWT secret raises ConfigurationError here, aborting startup.
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    logger.info("Building service container...")
    container = ServiceContainer(settings)
    try:
        container.warm()
    except Exception:
        await container.dispose()
        raise
    app.state.services = container
    logger.info("Service container ready")

    yield

    # Shutdown
    await container.dispose()
    logger.info("Service container disposed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Settings to run with (defaults to the cached environment settings)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="DocVault API",
        description="Multi-tenant document storage with company-scoped access",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_error_handlers(app)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Add observability middleware (correlation id is set before request logging runs)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(auth_protected_router)
    app.include_router(productions_router)
    app.include_router(documents_router)
    app.include_router(status_router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "docvault.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
