class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class FetchError(DomainError):
    """Raised when the backend cannot be reached or rejects a query."""
