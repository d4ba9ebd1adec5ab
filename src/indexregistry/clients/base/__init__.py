"""Base client interface — Abstract classes for search engine index bindings."""

from indexregistry.clients.base.client import IndexClient
from indexregistry.clients.base.registry import ClientRegistry

__all__ = ["ClientRegistry", "IndexClient"]
