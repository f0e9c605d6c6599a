"""FastAPI application entry point."""

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from isam_gateway import __version__
from isam_gateway.api.middleware import MaintenanceModeMiddleware
from isam_gateway.api.routes import site, status
from isam_gateway.config import Settings, get_settings
from isam_gateway.core.logger import configure_logging, get_logger
from isam_gateway.core.maintenance import compute_maintenance_config
from isam_gateway.core.static_files import resolve_doc_root

configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the effective startup configuration."""
    settings: Settings = app.state.settings
    maintenance = compute_maintenance_config(os.environ)

    logger.info(
        "gateway_listening",
        port=settings.port,
        doc_root=str(app.state.doc_root),
        maintenance="enabled" if maintenance.enabled else "disabled",
        maintenance_source=maintenance.source_var or "none",
    )

    yield

    logger.info("gateway_shutting_down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the gateway application.

    Args:
        settings: Startup settings (default: cached settings from the environment)

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    logger.info("gateway_starting", app_name=settings.app_name, env=settings.app_env)

    # No docs routes: every path belongs to the site.
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Static site gateway with maintenance mode for the ISAM website",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.doc_root = resolve_doc_root(settings)

    app.add_middleware(MaintenanceModeMiddleware)

    # Status endpoints must be registered before the catch-all.
    app.router.routes.extend(status.routes)
    app.router.routes.extend(site.routes)

    return app


app = create_app()


def run() -> None:
    """Serve the gateway with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "isam_gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
    )


if __name__ == "__main__":
    run()
