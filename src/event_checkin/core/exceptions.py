class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing, empty or malformed."""


class DuplicateError(DomainError):
    """Raised when the email or roll is already registered."""


class NotFoundError(DomainError):
    """Raised when no registration has the requested identifier."""


class AlreadyMarkedError(DomainError):
    """Raised when attendance was already recorded for a registration.

    Informational: the token is valid but has been used before.
    """


class PersistenceError(Exception):
    """Raised when the underlying storage cannot be read or written."""
