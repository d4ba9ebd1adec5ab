"""Client Registry — Manages registration and creation of index clients.

The registry maps backend names to ``IndexClient`` classes and creates
connected client instances from configuration. Clients it created are
tracked so they can be closed together.
"""

from __future__ import annotations

import logging
from typing import Any

from indexregistry.clients.base.client import IndexClient
from indexregistry.exceptions import BackendNotFoundError, MissingDependencyError

logger = logging.getLogger(__name__)


class ClientRegistry:
    """Registry for index client backends.

    Example:
        >>> clients = ClientRegistry.with_defaults()
        >>> client = clients.create("elasticsearch", hosts=["http://localhost:9200"])
        >>> clients.close_all()
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[IndexClient]] = {}
        self._instances: list[IndexClient] = []

    @classmethod
    def with_defaults(cls) -> ClientRegistry:
        """Create a registry with the built-in backends registered."""
        from indexregistry.clients.elasticsearch.client import ElasticsearchIndexClient
        from indexregistry.clients.memory.client import MemoryIndexClient
        from indexregistry.clients.opensearch.client import OpenSearchIndexClient

        registry = cls()
        registry.register("elasticsearch", ElasticsearchIndexClient)
        registry.register("opensearch", OpenSearchIndexClient)
        registry.register("memory", MemoryIndexClient)
        return registry

    def register(self, name: str, client_class: type[IndexClient]) -> None:
        """Register a client class.

        Args:
            name: Unique backend name.
            client_class: The ``IndexClient`` subclass to register.

        Raises:
            MissingDependencyError: If *client_class* is not an ``IndexClient``.
        """
        if not (isinstance(client_class, type) and issubclass(client_class, IndexClient)):
            raise MissingDependencyError(f"'{client_class!r}' is not an IndexClient implementation.")
        if name in self._classes:
            logger.warning("Overwriting existing client registration: %s", name)
        self._classes[name] = client_class
        logger.debug("Registered index client backend: %s", name)

    def create(self, name: str, **kwargs: Any) -> IndexClient:
        """Create and connect a client instance.

        Args:
            name: The registered backend name.
            **kwargs: Parameters passed to the client constructor.

        Returns:
            The connected client.

        Raises:
            BackendNotFoundError: If no backend is registered under this name.
        """
        if name not in self._classes:
            raise BackendNotFoundError(
                f"No index client registered with name '{name}'. Available backends: {list(self._classes.keys())}"
            )

        client = self._classes[name](**kwargs)
        client.connect()
        self._instances.append(client)
        logger.info("Connected index client: %s", name)
        return client

    def close_all(self) -> None:
        """Close every client created by this registry."""
        for client in self._instances:
            try:
                client.close()
            except Exception:
                logger.warning("Error closing index client: %s", client.name, exc_info=True)
        self._instances.clear()

    @property
    def backends(self) -> list[str]:
        """List all registered backend names."""
        return list(self._classes.keys())
