"""
Logging configuration shared by the application and Uvicorn.

``build_logging_config`` returns a ``logging.config.dictConfig``
mapping derived from ``LOG_LEVEL`` and ``LOG_FILE``.  ``run.py`` hands
the same mapping to Uvicorn as ``log_config``, so the server's
``uvicorn.error`` and ``uvicorn.access`` records go through the
service's handlers and format instead of Uvicorn's defaults.
``setup_logging`` applies it when the app is created outside
``run.py`` (e.g. ``uvicorn projects_api.app.main:app``).
"""

import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Server loggers routed to the root handlers instead of their own.
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def build_logging_config(level: Optional[str] = None, logfile: Optional[str] = None) -> Dict[str, Any]:
    """Return a ``dictConfig`` mapping for the service.

    ``level`` and ``logfile`` default to ``settings.log_level`` and
    ``settings.log_file``.  Unknown level names fall back to ``INFO``.
    """
    level_name = (level or settings.log_level).upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"
    logfile = settings.log_file if logfile is None else logfile

    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": str(Path(logfile).resolve()),
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": handlers,
        "root": {"level": level_name, "handlers": list(handlers)},
        "loggers": {
            name: {"level": level_name, "handlers": [], "propagate": True}
            for name in UVICORN_LOGGERS
        },
    }


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Apply :func:`build_logging_config` to the logging system."""
    logging.config.dictConfig(build_logging_config(level, logfile))
