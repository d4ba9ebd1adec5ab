"""Registry adapter — CRUD-style registration over a search index."""

from indexregistry.registry.registry import IndexRegistry, create_registry

__all__ = ["IndexRegistry", "create_registry"]
