"""Tests for ProjectService called directly, without HTTP."""

from __future__ import annotations

import asyncio

import pytest
from pymongo.errors import AutoReconnect

from projects_api.app.core.errors import StoreReadError, StoreWriteError
from projects_api.app.schemas.project import Language, ProjectIn
from projects_api.app.services.project_service import ProjectService

from .conftest import FakeCollection


def test_put_then_list(collection: FakeCollection) -> None:
    project = asyncio.run(
        ProjectService.put_project(collection, "n1", ProjectIn(language="go", url="https://go.dev"), upsert=False)
    )
    records = asyncio.run(ProjectService.list_projects(collection, language=Language.go))

    assert [r.name for r in records] == ["n1"]
    assert records[0].project == project


def test_added_has_millisecond_precision() -> None:
    now = ProjectService._now()

    assert now.microsecond % 1000 == 0
    assert now.utcoffset().total_seconds() == 0


def test_list_failure_chains_driver_error(collection: FakeCollection) -> None:
    error = AutoReconnect("gone")
    collection.fail("find", error)

    with pytest.raises(StoreReadError) as excinfo:
        asyncio.run(ProjectService.list_projects(collection))

    assert excinfo.value.message == "failed to fetch projects"
    assert excinfo.value.__cause__ is error


def test_put_failure(collection: FakeCollection) -> None:
    collection.fail("insert_one", AutoReconnect("gone"))

    with pytest.raises(StoreWriteError, match="failed to insert project"):
        asyncio.run(
            ProjectService.put_project(collection, "n1", ProjectIn(language="go", url="https://go.dev"), upsert=False)
        )
