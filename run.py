"""Entry point for the Projects API server.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example in Docker,
where you only specify a single Python file to run.

Configuration is read from environment variables: ``MONGO_URI`` for
the database and ``PORT`` (default ``9050``) / ``HOST`` (default
``0.0.0.0``) for the listener.  See ``projects_api.app.core.config``
for the full list.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from projects_api.app.core.config import settings
from projects_api.app.core.logging_config import build_logging_config
from projects_api.app.main import app


async def main() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Same handlers and format as the application loggers.
        log_config=build_logging_config(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
