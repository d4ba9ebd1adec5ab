"""Elasticsearch client — Index binding for Elasticsearch (v8+).

Uses the official ``elasticsearch`` package (synchronous client). Every
registry operation maps onto exactly one Elasticsearch API call.

Install the optional dependency::

    pip install indexregistry[elasticsearch]
    # or: pip install elasticsearch
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from indexregistry.clients.base.client import IndexClient, is_not_found_error, response_body
from indexregistry.exceptions import ConnectionError, MissingDependencyError, OperationError
from indexregistry.models.document import ClientHealth, Found, IndexHandle, Lookup, NotFound

logger = logging.getLogger(__name__)


class ElasticsearchIndexClient(IndexClient):
    """Index client for Elasticsearch (v8+).

    Args:
        hosts: List of Elasticsearch node URLs.
        username: Optional HTTP basic-auth username.
        password: Optional HTTP basic-auth password.
        api_key: Optional API key (encoded string).
        verify_certs: Whether to verify TLS certificates.
        refresh: Refresh policy for writes (``True``, ``False`` or ``"wait_for"``).
        max_documents: Upper bound for ``list_documents``.
        **kwargs: Additional keyword arguments forwarded to ``Elasticsearch``.
    """

    def __init__(
        self,
        hosts: list[str] | None = None,
        username: str | None = None,
        password: str | None = None,
        api_key: str | None = None,
        verify_certs: bool = True,
        refresh: bool | str = "wait_for",
        max_documents: int = 10000,
        **kwargs: Any,
    ) -> None:
        self._hosts = hosts or ["http://localhost:9200"]
        self._username = username
        self._password = password
        self._api_key = api_key
        self._verify_certs = verify_certs
        self._refresh = refresh
        self.max_documents = max_documents
        self._extra_kwargs = kwargs
        self._client: Any = None

    @property
    def name(self) -> str:
        return "elasticsearch"

    @property
    def connected(self) -> bool:
        return self._client is not None

    def connect(self) -> None:
        """Create the ``Elasticsearch`` client and verify the cluster answers."""
        try:
            from elasticsearch import Elasticsearch
        except ImportError as e:
            raise MissingDependencyError(
                "elasticsearch package is required.  Install with: pip install indexregistry[elasticsearch]"
            ) from e

        client_kwargs: dict[str, Any] = {
            "hosts": self._hosts,
            "verify_certs": self._verify_certs,
        }
        if self._username and self._password:
            client_kwargs["basic_auth"] = (self._username, self._password)
        if self._api_key:
            client_kwargs["api_key"] = self._api_key

        client_kwargs.update(self._extra_kwargs)

        try:
            client = Elasticsearch(**client_kwargs)
            info = response_body(client.info())
        except Exception as e:
            raise ConnectionError(f"Failed to connect to Elasticsearch: {e}") from e

        self._client = client
        version = info.get("version", {}).get("number", "unknown")
        cluster = info.get("cluster_name", "unknown")
        logger.info("Connected to Elasticsearch cluster: %s (v%s)", cluster, version)

    def close(self) -> None:
        """Close the Elasticsearch client."""
        if self._client:
            self._client.close()
            self._client = None

    # ── Index lifecycle ──────────────────────────────────────────────────

    def open_or_create_index(self, section: str) -> IndexHandle:
        self._require_connection()
        try:
            if self._client.indices.exists(index=section):
                return IndexHandle(name=section, created=False)
            self._client.indices.create(index=section)
        except Exception as e:
            if "resource_already_exists_exception" in str(e):
                return IndexHandle(name=section, created=False)
            raise OperationError(f"Failed to open index '{section}': {e}") from e

        logger.info("Created Elasticsearch index: %s", section)
        return IndexHandle(name=section, created=True)

    def delete_index(self, section: str) -> bool:
        self._require_connection()
        try:
            self._client.indices.delete(index=section)
        except Exception as e:
            if is_not_found_error(e):
                return False
            raise OperationError(f"Failed to delete index '{section}': {e}") from e
        return True

    # ── Documents ────────────────────────────────────────────────────────

    def add_document(self, section: str, value: dict[str, Any], identifier: str) -> None:
        self._require_connection()
        try:
            self._client.index(
                index=section,
                id=identifier,
                document=value,
                op_type="create",
                refresh=self._refresh,
            )
        except Exception as e:
            raise OperationError(f"Failed to add document '{identifier}': {e}") from e

    def update_document(self, identifier: str, value: dict[str, Any], section: str) -> None:
        self._require_connection()
        try:
            self._client.index(index=section, id=identifier, document=value, refresh=self._refresh)
        except Exception as e:
            raise OperationError(f"Failed to update document '{identifier}': {e}") from e

    def remove_documents(self, identifiers: Iterable[str], section: str) -> None:
        self._require_connection()
        operations = [{"delete": {"_index": section, "_id": identifier}} for identifier in identifiers]
        if not operations:
            return
        try:
            response = response_body(self._client.bulk(operations=operations, refresh=self._refresh))
        except Exception as e:
            raise OperationError(f"Failed to remove documents from '{section}': {e}") from e

        if response.get("errors"):
            failed = [
                item["delete"]["_id"]
                for item in response.get("items", [])
                if item.get("delete", {}).get("status", 200) not in (200, 404)
            ]
            if failed:
                raise OperationError(f"Failed to remove documents from '{section}': {failed}")

    def get_document(self, identifier: str, section: str) -> Lookup:
        self._require_connection()
        try:
            response = response_body(self._client.get(index=section, id=identifier))
        except Exception as e:
            if is_not_found_error(e):
                return NotFound(identifier=identifier, section=section)
            raise OperationError(f"Failed to fetch document '{identifier}': {e}") from e

        if not response.get("found", True):
            return NotFound(identifier=identifier, section=section)
        return Found(identifier=identifier, section=section, document=response.get("_source") or {})

    def get_documents(self, identifiers: Iterable[str], section: str) -> dict[str, dict[str, Any]]:
        self._require_connection()
        ids = list(identifiers)
        if not ids:
            return {}
        try:
            response = response_body(self._client.mget(index=section, ids=ids))
        except Exception as e:
            if is_not_found_error(e):
                return {}
            raise OperationError(f"Failed to fetch documents from '{section}': {e}") from e

        return {doc["_id"]: doc.get("_source") or {} for doc in response.get("docs", []) if doc.get("found")}

    def list_documents(self, section: str) -> dict[str, dict[str, Any]]:
        self._require_connection()
        try:
            response = response_body(
                self._client.search(index=section, query={"match_all": {}}, size=self.max_documents)
            )
        except Exception as e:
            if is_not_found_error(e):
                return {}
            raise OperationError(f"Failed to list documents in '{section}': {e}") from e

        hits = response.get("hits", {}).get("hits", [])
        return {hit["_id"]: hit.get("_source") or {} for hit in hits}

    # ── Health ───────────────────────────────────────────────────────────

    def health_check(self) -> ClientHealth:
        """Check Elasticsearch cluster health."""
        if not self._client:
            return ClientHealth(status="unhealthy", message="Client not initialized")

        try:
            start = time.monotonic()
            health = response_body(self._client.cluster.health())
            latency_ms = int((time.monotonic() - start) * 1000)
        except Exception as e:
            return ClientHealth(status="unhealthy", message=str(e))

        status_map = {"green": "healthy", "yellow": "degraded", "red": "unhealthy"}
        return ClientHealth(
            status=status_map.get(health.get("status", "red"), "unhealthy"),
            latency_ms=latency_ms,
            last_check=datetime.now(UTC).isoformat(),
            message=f"Cluster: {health.get('cluster_name')}, Nodes: {health.get('number_of_nodes')}",
        )
