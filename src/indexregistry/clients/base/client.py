"""Base index client — Abstract interface for search engine index bindings.

The registry adapter talks to a search backend exclusively through this
interface. A client is responsible for:
  1. Opening (or creating) and deleting named indices
  2. Adding, replacing, removing and fetching documents by identifier
  3. Reporting "not found" as a ``NotFound`` result, never as an exception
  4. Reporting health status
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from types import TracebackType
from typing import Any

from indexregistry.exceptions import ConnectionError
from indexregistry.models.document import ClientHealth, IndexHandle, Lookup


class IndexClient(ABC):
    """Abstract base class for index clients.

    All clients must implement:
      - connect() / close(): manage the underlying connection
      - open_or_create_index() / delete_index(): index lifecycle
      - add_document() / update_document() / remove_documents(): writes
      - get_document() / get_documents() / list_documents(): reads
      - health_check(): report backend health

    Calls are synchronous and blocking; retries and timeouts are left to the
    underlying client library.
    """

    #: Upper bound on the number of documents returned by ``list_documents``.
    max_documents: int = 10000

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique backend name (e.g., 'elasticsearch', 'opensearch')."""

    @property
    @abstractmethod
    def connected(self) -> bool:
        """Whether ``connect()`` has completed."""

    @abstractmethod
    def connect(self) -> None:
        """Open the connection to the backend.

        Raises:
            MissingDependencyError: If the backend library is not installed.
            ConnectionError: If the backend cannot be reached.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the connection. Safe to call more than once."""

    # ── Index lifecycle ──────────────────────────────────────────────────

    @abstractmethod
    def open_or_create_index(self, section: str) -> IndexHandle:
        """Open the index named *section*, creating it if it does not exist."""

    @abstractmethod
    def delete_index(self, section: str) -> bool:
        """Delete the index named *section*.

        Returns:
            ``False`` if the index did not exist, ``True`` otherwise.
        """

    # ── Documents ────────────────────────────────────────────────────────

    @abstractmethod
    def add_document(self, section: str, value: dict[str, Any], identifier: str) -> None:
        """Store *value* under *identifier* in *section*."""

    @abstractmethod
    def update_document(self, identifier: str, value: dict[str, Any], section: str) -> None:
        """Overwrite the value stored under *identifier* with *value*."""

    @abstractmethod
    def remove_documents(self, identifiers: Iterable[str], section: str) -> None:
        """Remove every document listed in *identifiers* from *section*."""

    @abstractmethod
    def get_document(self, identifier: str, section: str) -> Lookup:
        """Fetch a single document.

        Returns:
            ``Found`` with the stored value, or ``NotFound``.

        Raises:
            OperationError: For any backend failure other than a missing document.
        """

    @abstractmethod
    def get_documents(self, identifiers: Iterable[str], section: str) -> dict[str, dict[str, Any]]:
        """Fetch several documents at once; missing identifiers are omitted."""

    @abstractmethod
    def list_documents(self, section: str) -> dict[str, dict[str, Any]]:
        """Return up to ``max_documents`` documents stored in *section*."""

    @abstractmethod
    def health_check(self) -> ClientHealth:
        """Check the health of the search backend."""

    # ── Helpers ──────────────────────────────────────────────────────────

    def _require_connection(self) -> None:
        if not self.connected:
            raise ConnectionError(f"{self.name} client not initialized. Call connect() first.")

    def __enter__(self) -> IndexClient:
        if not self.connected:
            self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def is_not_found_error(exc: BaseException) -> bool:
    """Whether a backend library exception means "document or index missing"."""
    if "NotFoundError" in type(exc).__name__:
        return True
    if getattr(exc, "status_code", None) == 404:
        return True
    meta = getattr(exc, "meta", None)
    return getattr(meta, "status", None) == 404


def response_body(response: Any) -> dict[str, Any]:
    """Unwrap a client response object into a plain dict."""
    return dict(getattr(response, "body", response) or {})
