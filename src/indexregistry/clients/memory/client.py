"""In-memory client — Index binding backed by plain dictionaries.

Useful for tests and for hosts that embed a registry without a search
cluster. Stored values are deep-copied on the way in and out, so callers
never share state with the store.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from indexregistry.clients.base.client import IndexClient
from indexregistry.exceptions import OperationError
from indexregistry.models.document import ClientHealth, Found, IndexHandle, Lookup, NotFound

logger = logging.getLogger(__name__)


class MemoryIndexClient(IndexClient):
    """Index client that keeps every index in process memory.

    Args:
        max_documents: Upper bound for ``list_documents``.
        **kwargs: Accepted for configuration symmetry and ignored.
    """

    def __init__(self, max_documents: int = 10000, **kwargs: Any) -> None:
        self.max_documents = max_documents
        self._indices: dict[str, dict[str, dict[str, Any]]] = {}
        self._connected = False

    @property
    def name(self) -> str:
        return "memory"

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def indices(self) -> list[str]:
        """Names of the indices currently held."""
        return list(self._indices.keys())

    def connect(self) -> None:
        self._connected = True

    def close(self) -> None:
        self._connected = False

    def open_or_create_index(self, section: str) -> IndexHandle:
        self._require_connection()
        if section in self._indices:
            return IndexHandle(name=section, created=False)
        self._indices[section] = {}
        logger.info("Created in-memory index: %s", section)
        return IndexHandle(name=section, created=True)

    def delete_index(self, section: str) -> bool:
        self._require_connection()
        return self._indices.pop(section, None) is not None

    def add_document(self, section: str, value: dict[str, Any], identifier: str) -> None:
        self._require_connection()
        _check_value(identifier, value)
        documents = self._indices.setdefault(section, {})
        if identifier in documents:
            raise OperationError(f"Document '{identifier}' already exists in '{section}'.")
        documents[identifier] = copy.deepcopy(dict(value))

    def update_document(self, identifier: str, value: dict[str, Any], section: str) -> None:
        self._require_connection()
        _check_value(identifier, value)
        self._indices.setdefault(section, {})[identifier] = copy.deepcopy(dict(value))

    def remove_documents(self, identifiers: Iterable[str], section: str) -> None:
        self._require_connection()
        documents = self._indices.get(section, {})
        for identifier in identifiers:
            documents.pop(identifier, None)

    def get_document(self, identifier: str, section: str) -> Lookup:
        self._require_connection()
        documents = self._indices.get(section, {})
        if identifier not in documents:
            return NotFound(identifier=identifier, section=section)
        return Found(identifier=identifier, section=section, document=copy.deepcopy(documents[identifier]))

    def get_documents(self, identifiers: Iterable[str], section: str) -> dict[str, dict[str, Any]]:
        self._require_connection()
        documents = self._indices.get(section, {})
        return {
            identifier: copy.deepcopy(documents[identifier]) for identifier in identifiers if identifier in documents
        }

    def list_documents(self, section: str) -> dict[str, dict[str, Any]]:
        self._require_connection()
        documents = self._indices.get(section, {})
        return {
            identifier: copy.deepcopy(value)
            for identifier, value in list(documents.items())[: self.max_documents]
        }

    def health_check(self) -> ClientHealth:
        if not self._connected:
            return ClientHealth(status="unhealthy", message="Client not initialized")
        return ClientHealth(
            status="healthy",
            last_check=datetime.now(UTC).isoformat(),
            message=f"Indices: {len(self._indices)}",
        )


def _check_value(identifier: str, value: Any) -> None:
    # Search backends only store JSON objects as documents.
    if not isinstance(value, Mapping):
        raise OperationError(
            f"Document '{identifier}' must be a mapping, got {type(value).__name__}."
        )
