"""Registry data models — Lookup results, index handles and lifecycle state.

Index clients never signal a missing document with an exception. A lookup
returns either ``Found`` (carrying the stored value) or ``NotFound``; every
other backend failure is raised as an ``OperationError``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


class RegistryState(str, Enum):
    """Lifecycle of one section within a registry adapter."""

    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    DESTROYED = "destroyed"


class IndexHandle(BaseModel):
    """An opened backing index."""

    name: str = Field(description="Index name (the normalized section)")
    created: bool = Field(default=False, description="Whether the index was created by this call")


class Found(BaseModel):
    """Successful lookup of a document by identifier."""

    found: Literal[True] = True
    identifier: str = Field(description="Document identifier")
    section: str = Field(description="Section the document was looked up in")
    document: dict[str, Any] = Field(default_factory=dict, description="Stored document value")


class NotFound(BaseModel):
    """Lookup of an identifier that has no document in the section."""

    found: Literal[False] = False
    identifier: str = Field(description="Document identifier")
    section: str = Field(description="Section the document was looked up in")


Lookup = Found | NotFound


class ClientHealth(BaseModel):
    """Health status of an index client."""

    status: str = Field(description="Health status: healthy, degraded, unhealthy")
    latency_ms: int = Field(default=0, description="Latency of last health check in ms")
    last_check: str | None = Field(default=None, description="ISO timestamp of last health check")
    message: str | None = Field(default=None, description="Additional health message")
