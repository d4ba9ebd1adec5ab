"""Index registry — Identifier-keyed registration semantics over a search index.

An ``IndexRegistry`` binds one section (an index name) to a backing index
and exposes register / replace / unregister / existence-check / destroy on
top of an injected ``IndexClient``. Each operation performs a local
existence check and then exactly one delegated client call.

The section → index handle map is owned by the registry instance. Callers
that want several registries to guard against each other pass the same
dict to each of them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from indexregistry.clients.base.client import IndexClient
from indexregistry.clients.base.registry import ClientRegistry
from indexregistry.config.settings import Settings
from indexregistry.exceptions import (
    DuplicateInitiationError,
    DuplicateRegistrationError,
    MissingDependencyError,
    ModificationFailedError,
    RegistryNotActiveError,
    UnknownIdentifierError,
)
from indexregistry.models.document import IndexHandle, RegistryState

logger = logging.getLogger(__name__)


class IndexRegistry:
    """Registry of documents stored in one search index.

    Construction initializes the registry, so a new instance is ``ACTIVE``.
    After ``destroy()`` the instance is ``DESTROYED`` and may be brought
    back with ``init()``.

    Args:
        section: Name of the section; normalized to lowercase.
        client: Connected index client used for every backend call.
        registry: Optional section → handle map shared with other registries.

    Raises:
        MissingDependencyError: If *client* is not an ``IndexClient``.
        DuplicateInitiationError: If *registry* already holds the section.

    Example:
        >>> registry = IndexRegistry("events", client)
        >>> registry.register("e1", {"name": "conf"})
        >>> registry.is_registered("e1")
        True
    """

    def __init__(
        self,
        section: str,
        client: IndexClient,
        registry: dict[str, IndexHandle] | None = None,
    ) -> None:
        if not isinstance(client, IndexClient):
            raise MissingDependencyError(
                f"An IndexClient implementation is required, got {type(client).__name__}."
            )

        self._client = client
        self._section = section
        self._registry: dict[str, IndexHandle] = registry if registry is not None else {}
        self._state = RegistryState.UNINITIALIZED

        self.init()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def section(self) -> str:
        return self._section

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def client(self) -> IndexClient:
        return self._client

    @property
    def handle(self) -> IndexHandle | None:
        """Handle of the backing index, or None when not active."""
        return self._registry.get(self._section)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def init(self) -> None:
        """Open (or create) the backing index and mark the section active.

        Raises:
            DuplicateInitiationError: If a registry for the section is already active.
        """
        # Index names must be lowercase.
        section = self._section.lower()

        if section in self._registry:
            raise DuplicateInitiationError(f"A registry for section '{section}' is already active.")

        handle = self._client.open_or_create_index(section)

        self._section = section
        self._registry[section] = handle
        self._state = RegistryState.ACTIVE
        logger.info("Initialized registry: %s (created=%s)", section, handle.created)

    def destroy(self) -> None:
        """Forget the section and delete its backing index.

        Deleting an index that no longer exists is not an error.

        Raises:
            RegistryNotActiveError: If the registry is not active.
            OperationError: If the backend fails to delete the index.
        """
        self._require_active()

        self._registry.pop(self._section, None)
        self._state = RegistryState.DESTROYED

        if not self._client.delete_index(self._section):
            logger.warning("Index for section %s was already absent", self._section)
        logger.info("Destroyed registry: %s", self._section)

    # ── Registration ─────────────────────────────────────────────────────

    def is_registered(self, identifier: str) -> bool:
        """Whether a document is stored under *identifier*.

        Backend failures other than a missing document propagate as
        ``OperationError``.
        """
        self._require_active()
        return self._client.get_document(identifier, self._section).found

    def register(self, identifier: str, value: dict[str, Any]) -> None:
        """Add *value* to the registry under *identifier*.

        Raises:
            DuplicateRegistrationError: If *identifier* is already registered.
        """
        if self.is_registered(identifier):
            raise DuplicateRegistrationError(
                f"Identifier '{identifier}' is already registered in section '{self._section}'."
            )

        self._client.add_document(self._section, value, identifier)
        logger.debug("Registered %s in %s", identifier, self._section)

    def replace(self, identifier: str, value: dict[str, Any]) -> None:
        """Replace the value stored under *identifier* with *value*.

        Raises:
            ModificationFailedError: If *identifier* is not registered.
        """
        if not self.is_registered(identifier):
            raise ModificationFailedError(
                f"Cannot replace '{identifier}': not registered in section '{self._section}'."
            )

        self._client.update_document(identifier, value, self._section)
        logger.debug("Replaced %s in %s", identifier, self._section)

    def unregister(self, identifier: str) -> None:
        """Remove the document stored under *identifier*.

        Raises:
            UnknownIdentifierError: If *identifier* is not registered.
        """
        if not self.is_registered(identifier):
            raise UnknownIdentifierError(
                f"Cannot unregister '{identifier}': not registered in section '{self._section}'."
            )

        self._client.remove_documents([identifier], self._section)
        logger.debug("Unregistered %s from %s", identifier, self._section)

    # ── Content ──────────────────────────────────────────────────────────

    def get_content_by_id(self, identifier: str, default: Any = None) -> Any:
        """Return the value stored under *identifier*, or *default*."""
        self._require_active()
        lookup = self._client.get_document(identifier, self._section)
        return lookup.document if lookup.found else default

    def get_content_by_ids(self, identifiers: Iterable[str]) -> dict[str, dict[str, Any]]:
        """Return the stored values of *identifiers*; unknown ones are omitted."""
        self._require_active()
        return self._client.get_documents(identifiers, self._section)

    def get_content(self) -> dict[str, dict[str, Any]]:
        """Return every entry of the section, keyed by identifier."""
        self._require_active()
        return self._client.list_documents(self._section)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _require_active(self) -> None:
        if self._state is not RegistryState.ACTIVE:
            raise RegistryNotActiveError(
                f"Registry for section '{self._section}' is {self._state.value}. Call init() first."
            )

    def __repr__(self) -> str:
        return f"IndexRegistry(section={self._section!r}, client={self._client.name!r}, state={self._state.value!r})"


def create_registry(
    section: str,
    settings: Settings | None = None,
    registry: dict[str, IndexHandle] | None = None,
    clients: ClientRegistry | None = None,
) -> IndexRegistry:
    """Build an ``IndexRegistry`` whose client is created from settings.

    Args:
        section: Name of the section.
        settings: Settings to read the client configuration from. Loaded from
            the environment if None.
        registry: Optional section → handle map shared with other registries.
        clients: Client registry to create the client with. Built-in backends
            are used if None.

    Returns:
        An active registry for *section*.
    """
    settings = settings or Settings()
    clients = clients or ClientRegistry.with_defaults()
    client = clients.create(settings.client.backend, **settings.client.client_kwargs())
    try:
        return IndexRegistry(section, client, registry=registry)
    except BaseException:
        client.close()
        raise
