class DomainError(Exception):
    """Base exception for business rule violations."""


class InvalidArgumentError(DomainError):
    """Raised when a required argument is missing, empty or malformed."""


class StorageError(DomainError):
    """Raised when the durable medium cannot be read or written."""


class StorageCorruptError(StorageError):
    """Raised when stored content cannot be decoded into a mapping.

    Always recovered by the entry store, never surfaced to callers.
    """
