"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so that
the service starts against a local MongoDB without any setup.  In a
production deployment ``MONGO_URI`` should always be set explicitly.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "My API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Address the HTTP server binds to.  ``PORT`` defaults to 9050.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "9050"))

    # MongoDB connection string and the collection holding project
    # records.  Records live in ``demo.projects`` unless overridden.
    mongo_uri: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    mongo_database: str = os.getenv("MONGO_DATABASE", "demo")
    mongo_collection: str = os.getenv("MONGO_COLLECTION", "projects")

    # When enabled, ``PUT /projects/{name}`` replaces the record with the
    # same name instead of inserting another one.
    upsert_on_put: bool = _env_flag("UPSERT_ON_PUT")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
