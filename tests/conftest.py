"""Shared test fixtures and configuration."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from indexregistry.clients.base.client import IndexClient
from indexregistry.clients.memory.client import MemoryIndexClient
from indexregistry.config.settings import Settings
from indexregistry.models.document import IndexHandle, NotFound


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance backed by the in-memory client."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        client={"backend": "memory"},
    )


@pytest.fixture
def memory_client() -> MemoryIndexClient:
    """A connected in-memory index client."""
    client = MemoryIndexClient()
    client.connect()
    return client


@pytest.fixture
def mock_client() -> MagicMock:
    """A mocked index client where every identifier is unknown."""
    client = MagicMock(spec=IndexClient)
    client.name = "mock"
    client.open_or_create_index.side_effect = lambda section: IndexHandle(name=section, created=True)
    client.get_document.side_effect = lambda identifier, section: NotFound(identifier=identifier, section=section)
    client.delete_index.return_value = True
    return client


@pytest.fixture
def event_value() -> dict:
    return {"name": "conf", "city": "Zurich", "tags": ["drupal", "search"]}
