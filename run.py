"""Entry point for running the Social Media API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
come from the environment (``API_HOST``, ``API_PORT``, ``LOG_LEVEL``),
see ``social_media_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from social_media_api.app.core.config import settings
from social_media_api.app.main import app


def build_server() -> Server:
    """Create a Uvicorn server bound to the configured host and port."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    return Server(config)


async def main() -> None:
    """Serve the API until interrupted."""
    logging.getLogger(__name__).info("Starting API on %s:%s", settings.host, settings.port)
    await build_server().serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
