"""Exceptions raised by persistedql."""


class PersistedQLError(Exception):
    """Base class for all persistedql errors."""

    pass


class ApqConfigurationError(PersistedQLError, RuntimeError):
    """Raised when the APQ stage is deployed with missing collaborators.

    This is not a client error. A request that needs a collaborator the
    server was not configured with must abort instead of being answered.
    """

    pass


class ExtensionsDecodeError(PersistedQLError, ValueError):
    """Raised when a JSON-encoded ``extensions`` value cannot be decoded."""

    pass
