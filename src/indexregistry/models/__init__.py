"""Data models shared by the registry and its index clients."""

from indexregistry.models.document import ClientHealth, Found, IndexHandle, Lookup, NotFound, RegistryState

__all__ = ["ClientHealth", "Found", "IndexHandle", "Lookup", "NotFound", "RegistryState"]
