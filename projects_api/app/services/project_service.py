"""
Service layer for projects.

Two operations exist: listing records, optionally restricted to one
language, and storing a project under a name.  Driver failures are
logged here and re-raised as ``StoreReadError`` or ``StoreWriteError``
carrying the fixed message the API returns; callers never see a
partial result.

Storing is an unconditional insert, so the same name may appear more
than once.  With ``upsert_on_put`` enabled in settings the record with
the same name is replaced instead.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from projects_api.app.core.config import settings
from projects_api.app.core.errors import StoreReadError, StoreWriteError
from projects_api.app.schemas.project import Language, Project, ProjectIn, ProjectRecord

logger = logging.getLogger(__name__)


class ProjectService:
    """Service class for reading and writing project records."""

    @classmethod
    async def list_projects(
        cls,
        collection: AsyncCollection,
        language: Optional[Language] = None,
    ) -> List[ProjectRecord]:
        """Return all records, or only those whose project uses ``language``.

        Records come back in whatever order the store yields them.
        """
        query: Dict[str, Any] = {}
        if language:
            query["project.language"] = Language(language).value
        try:
            cursor = collection.find(query)
        except PyMongoError as exc:
            logger.exception("Project query %s failed", query)
            raise StoreReadError("failed to fetch projects") from exc

        try:
            try:
                documents = await cursor.to_list()
            finally:
                await cursor.close()
            return [ProjectRecord.model_validate(doc) for doc in documents]
        except (PyMongoError, ValidationError) as exc:
            logger.exception("Reading projects for query %s failed", query)
            raise StoreReadError("failed to decode projects") from exc

    @classmethod
    async def put_project(
        cls,
        collection: AsyncCollection,
        name: str,
        data: ProjectIn,
        upsert: Optional[bool] = None,
    ) -> Project:
        """Stamp ``data`` with the current time and store it under ``name``.

        ``upsert`` defaults to ``settings.upsert_on_put``.
        """
        if upsert is None:
            upsert = settings.upsert_on_put
        project = Project(**data.model_dump(), added=cls._now())
        record = ProjectRecord(name=name, project=project)
        document = record.model_dump()
        try:
            if upsert:
                await collection.replace_one({"name": name}, document, upsert=True)
            else:
                await collection.insert_one(document)
        except PyMongoError as exc:
            logger.exception("Storing project %r failed", name)
            raise StoreWriteError("failed to insert project") from exc
        logger.info("Stored project %r (%s)", name, project.language)
        return project

    @staticmethod
    def _now() -> datetime:
        # BSON dates have millisecond precision; truncate so the value
        # returned now equals the one read back later.
        now = datetime.now(timezone.utc)
        return now.replace(microsecond=now.microsecond // 1000 * 1000)
