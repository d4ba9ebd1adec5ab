"""indexregistry — Identifier-keyed registries backed by a search engine index."""

from indexregistry.clients.base import ClientRegistry, IndexClient
from indexregistry.exceptions import (
    DuplicateInitiationError,
    DuplicateRegistrationError,
    IndexRegistryError,
    MissingDependencyError,
    ModificationFailedError,
    RegistryNotActiveError,
    UnknownIdentifierError,
)
from indexregistry.registry import IndexRegistry, create_registry

__version__ = "0.1.0"

__all__ = [
    "ClientRegistry",
    "DuplicateInitiationError",
    "DuplicateRegistrationError",
    "IndexClient",
    "IndexRegistry",
    "IndexRegistryError",
    "MissingDependencyError",
    "ModificationFailedError",
    "RegistryNotActiveError",
    "UnknownIdentifierError",
    "__version__",
    "create_registry",
]
