"""Exception hierarchy for indexregistry.

All exceptions inherit from IndexRegistryError (single catch point) and carry
a human-readable ``message`` plus a stable machine ``code``.
"""

from __future__ import annotations


class IndexRegistryError(Exception):
    """Base exception for all indexregistry errors."""

    code: str = "index_registry_error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}" if self.message else f"[{self.code}]"


# ── Registry errors ──────────────────────────────────────────────────────────


class MissingDependencyError(IndexRegistryError):
    """The index client (or the library behind it) is unavailable."""

    code = "missing_dependency"


class DuplicateInitiationError(IndexRegistryError):
    """A registry for the section is already active."""

    code = "duplicate_initiation"


class DuplicateRegistrationError(IndexRegistryError):
    """The identifier is already registered in the section."""

    code = "duplicate_registration"


class ModificationFailedError(IndexRegistryError):
    """Replacement was requested for an identifier that is not registered."""

    code = "modification_failed"


class UnknownIdentifierError(IndexRegistryError):
    """Removal was requested for an identifier that is not registered."""

    code = "unknown_identifier"


class RegistryNotActiveError(IndexRegistryError):
    """An operation was attempted on a registry that is not initialized."""

    code = "registry_not_active"


# ── Index client errors ──────────────────────────────────────────────────────


class IndexClientError(IndexRegistryError):
    """Base exception for errors raised by an index client."""

    code = "index_client_error"


class ConnectionError(IndexClientError):
    """Raised when the client cannot reach the search backend."""

    code = "connection_error"


class OperationError(IndexClientError):
    """Raised when a backend call fails for any reason other than "not found"."""

    code = "operation_error"


class ConfigurationError(IndexClientError):
    """Raised when client configuration is invalid."""

    code = "configuration_error"


class BackendNotFoundError(IndexClientError):
    """Raised when a requested client backend is not registered."""

    code = "backend_not_found"
