"""
Main entrypoint for the Projects API.

This module assembles the FastAPI application, sets up logging and
includes the project routes.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with ``python run.py`` or any ASGI server, e.g.::

    uvicorn projects_api.app.main:app --port 9050

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from fastapi import FastAPI

from .api.router import router
from .core import db
from .core.config import settings
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that startup messages are formatted.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        db.connect()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await db.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
