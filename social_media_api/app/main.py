"""
Main entrypoint for the Social Media API.

This module assembles the FastAPI application, sets up logging,
registers exception handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn social_media_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .core.db import init_db
from .api.errors import register_exception_handlers
from .api.v1.router import router as v1_router


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that startup messages below are captured.
    setup_logging(settings.log_level, settings.log_file, settings.log_format)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    register_exception_handlers(app)

    # Clients address the original unversioned paths (``/register``,
    # ``/messages``), so version 1 is mounted at the root.
    app.include_router(v1_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        init_db()

    return app


app = create_app()
