class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTransitionError(ValidationError):
    """Raised when an unlock request is asked to leave a terminal status."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""
