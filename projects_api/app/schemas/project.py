"""
Pydantic models for project data.

A ``Project`` is a URL together with the language it was written in
and the time the server recorded it.  A ``ProjectRecord`` pairs a
project with the name it was stored under; this is the document shape
kept in the collection.  Every successful response wraps its payload
in ``Response`` so clients always find the data under ``body``.
"""

from datetime import datetime
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import AnyUrl, BaseModel, Field, TypeAdapter, ValidationError, field_validator

T = TypeVar("T")

_uri_adapter = TypeAdapter(AnyUrl)


class Language(str, Enum):
    """Languages a project may be written in."""

    go = "go"
    rust = "rust"
    python = "python"
    typescript = "typescript"


class ProjectIn(BaseModel):
    """Request body for storing a project.

    ``added`` is not part of the input; a value sent by the client is
    ignored together with any other unknown field.
    """

    language: Language = Field(..., examples=["python"])
    url: str = Field(..., description="Absolute URI of the project", examples=["https://github.com/pallets/flask"])

    model_config = {"use_enum_values": True}

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        # Validate as a URI but keep the client's spelling; AnyUrl would
        # normalise it (e.g. append a trailing slash).
        try:
            uri = _uri_adapter.validate_python(v)
        except ValidationError:
            raise ValueError("url must be an absolute URI") from None
        if not uri.host:
            raise ValueError("url must include a host")
        return v


class Project(ProjectIn):
    """A stored project, including the server-set insertion time."""

    added: datetime = Field(..., json_schema_extra={"readOnly": True})


class ProjectRecord(BaseModel):
    """A project stored under a name; one document in the collection."""

    name: str
    project: Project


class ProjectFilter(BaseModel):
    """Query parameters accepted when listing projects."""

    language: Optional[Language] = Field(None, description="Filter by language")

    @field_validator("language", mode="before")
    @classmethod
    def empty_means_unfiltered(cls, v):
        return v or None


class Response(BaseModel, Generic[T]):
    """Envelope for successful responses."""

    body: T
