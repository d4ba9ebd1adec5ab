"""Tests for the index client registry."""

from __future__ import annotations

import logging
import sys

import pytest

from indexregistry.clients.base.registry import ClientRegistry
from indexregistry.clients.elasticsearch.client import ElasticsearchIndexClient
from indexregistry.clients.memory.client import MemoryIndexClient
from indexregistry.exceptions import BackendNotFoundError, MissingDependencyError


class TestClientRegistry:
    def test_defaults(self) -> None:
        registry = ClientRegistry.with_defaults()
        assert registry.backends == ["elasticsearch", "opensearch", "memory"]

    def test_create_connects(self) -> None:
        registry = ClientRegistry.with_defaults()

        client = registry.create("memory", max_documents=5)

        assert isinstance(client, MemoryIndexClient)
        assert client.connected is True
        assert client.max_documents == 5

    def test_create_unknown_backend(self) -> None:
        registry = ClientRegistry()
        with pytest.raises(BackendNotFoundError, match="solr") as exc_info:
            registry.create("solr")
        assert exc_info.value.code == "backend_not_found"

    def test_register_rejects_non_clients(self) -> None:
        registry = ClientRegistry()
        with pytest.raises(MissingDependencyError):
            registry.register("dict", dict)  # type: ignore[arg-type]

    def test_register_overwrite_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = ClientRegistry.with_defaults()

        with caplog.at_level(logging.WARNING):
            registry.register("elasticsearch", MemoryIndexClient)

        assert "Overwriting" in caplog.text
        assert isinstance(registry.create("elasticsearch"), MemoryIndexClient)

    def test_close_all(self) -> None:
        registry = ClientRegistry.with_defaults()
        first = registry.create("memory")
        second = registry.create("memory")

        registry.close_all()

        assert first.connected is False
        assert second.connected is False

    def test_create_propagates_missing_library(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "elasticsearch", None)
        registry = ClientRegistry()
        registry.register("elasticsearch", ElasticsearchIndexClient)

        with pytest.raises(MissingDependencyError):
            registry.create("elasticsearch")
