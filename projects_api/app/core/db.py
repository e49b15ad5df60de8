"""
MongoDB integration.

This module owns the single ``AsyncMongoClient`` used by the process
and exposes the project collection to route handlers through the
``get_collection`` dependency.  The client is safe for concurrent use
and pools its own connections, so one instance is shared by every
request.  ``connect`` and ``close`` are wired to the application's
startup and shutdown events in ``main``.
"""

import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from .config import settings

logger = logging.getLogger(__name__)

_client: Optional[AsyncMongoClient] = None


def connect() -> AsyncMongoClient:
    """Return the shared client, creating it on first use.

    Creating the client does not open a connection; the driver
    connects lazily on the first operation, so a missing server shows
    up as a failed request rather than a failed startup.
    """
    global _client
    if _client is None:
        _client = AsyncMongoClient(settings.mongo_uri, tz_aware=True)
        logger.info(
            "MongoDB client created for %s.%s",
            settings.mongo_database,
            settings.mongo_collection,
        )
    return _client


async def close() -> None:
    """Close the shared client if one was created."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None
        logger.info("MongoDB client closed")


def get_collection() -> AsyncCollection:
    """FastAPI dependency returning the project collection handle."""
    return connect()[settings.mongo_database][settings.mongo_collection]
