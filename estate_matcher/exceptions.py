"""Custom exception hierarchy for estate-matcher."""


class EstateMatcherError(Exception):
    """Base exception for all estate-matcher errors."""


class InvalidInputError(EstateMatcherError):
    """Raised when calculator inputs are negative, non-finite or out of range."""


class InvalidRecordError(EstateMatcherError):
    """Raised when a raw dataset row cannot be normalized."""


class EntityNotFoundError(EstateMatcherError):
    """Raised when a referenced entity does not exist."""


class ClientNotFoundError(EntityNotFoundError):
    """Raised when a client id is not in the store."""


class PropertyNotFoundError(EntityNotFoundError):
    """Raised when a property id is not in the catalogue."""


class DuplicateEntityError(EstateMatcherError):
    """Raised when adding an entity whose id is already taken."""


class AuthenticationError(EstateMatcherError):
    """Raised when agent credentials are missing or no agent is logged in."""


class ConfigurationError(EstateMatcherError):
    """Raised when configuration is invalid or missing."""


class StorageError(EstateMatcherError):
    """Raised when a storage backend cannot be read or written."""
