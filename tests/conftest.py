"""
Shared fixtures for the Projects API tests.

The MongoDB collection is replaced with ``FakeCollection``, an
in-memory stand-in for the handful of driver calls the service makes.
It can be told to fail at a given call to simulate store errors.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from projects_api.app.api.router import router
from projects_api.app.core.db import get_collection


def _lookup(document: Dict[str, Any], dotted_key: str) -> Any:
    value: Any = document
    for part in dotted_key.split("."):
        if not isinstance(value, dict) or part not in value:
            return None
        value = value[part]
    return value


class FakeCursor:
    def __init__(
        self,
        documents: List[Dict[str, Any]],
        error: Optional[PyMongoError] = None,
        close_error: Optional[PyMongoError] = None,
    ) -> None:
        self._documents = documents
        self._error = error
        self._close_error = close_error
        self.closed = False

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        if self._error is not None:
            raise self._error
        return [copy.deepcopy(doc) for doc in self._documents]

    async def close(self) -> None:
        self.closed = True
        if self._close_error is not None:
            raise self._close_error


class FakeCollection:
    """Minimal async collection keeping documents in a list."""

    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.failures: Dict[str, PyMongoError] = {}
        self.queries: List[Dict[str, Any]] = []
        self.cursors: List[FakeCursor] = []

    def fail(self, operation: str, error: PyMongoError) -> None:
        """Raise ``error`` from the next and all later ``operation`` calls."""
        self.failures[operation] = error

    def _check(self, operation: str) -> None:
        if operation in self.failures:
            raise self.failures[operation]

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self._check("find")
        self.queries.append(query)
        matches = [
            doc for doc in self.documents
            if all(_lookup(doc, key) == value for key, value in query.items())
        ]
        cursor = FakeCursor(matches, self.failures.get("to_list"), self.failures.get("close"))
        self.cursors.append(cursor)
        return cursor

    async def insert_one(self, document: Dict[str, Any]) -> None:
        self._check("insert_one")
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))

    async def replace_one(self, query: Dict[str, Any], document: Dict[str, Any], upsert: bool = False) -> None:
        self._check("replace_one")
        for i, doc in enumerate(self.documents):
            if all(_lookup(doc, key) == value for key, value in query.items()):
                self.documents[i] = dict(copy.deepcopy(document), _id=doc["_id"])
                return
        if upsert:
            self.documents.append(dict(copy.deepcopy(document), _id=ObjectId()))


@pytest.fixture
def collection() -> FakeCollection:
    """Fresh in-memory collection."""
    return FakeCollection()


@pytest.fixture
def app(collection: FakeCollection) -> FastAPI:
    """Test FastAPI app with the project routes."""
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_collection] = lambda: collection
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client."""
    return TestClient(app)
