"""
Project endpoints.

``GET /projects`` lists stored records, optionally filtered by
language.  ``PUT /projects/{name}`` stores a project under ``name``
and returns it with the server-set ``added`` timestamp.  Store
failures become HTTP 500 with a fixed message; invalid input is
rejected with 422 by FastAPI before a handler runs.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pymongo.asynchronous.collection import AsyncCollection

from projects_api.app.core.db import get_collection
from projects_api.app.core.errors import StoreError
from projects_api.app.schemas.project import (
    Project,
    ProjectFilter,
    ProjectIn,
    ProjectRecord,
    Response,
)
from projects_api.app.services.project_service import ProjectService

router = APIRouter()


@router.get("", response_model=Response[List[ProjectRecord]])
async def list_projects(
    filters: Annotated[ProjectFilter, Query()],
    collection: AsyncCollection = Depends(get_collection),
) -> Response[List[ProjectRecord]]:
    """Return every stored project, or only those in ``language``."""
    try:
        records = await ProjectService.list_projects(collection, language=filters.language)
    except StoreError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exc.message)
    return Response[List[ProjectRecord]](body=records)


@router.put("/{name:path}", response_model=Response[Project])
async def put_project(
    name: str,
    project_in: ProjectIn,
    collection: AsyncCollection = Depends(get_collection),
) -> Response[Project]:
    """Store a project under ``name``.

    ``name`` may contain slashes: ``a%2Fb`` and ``a/b`` both store the
    name ``a/b``.  By default this always inserts, so calling it twice
    with the same name leaves two records.  Set ``UPSERT_ON_PUT`` to
    replace instead.
    """
    try:
        project = await ProjectService.put_project(collection, name, project_in)
    except StoreError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exc.message)
    return Response[Project](body=project)
