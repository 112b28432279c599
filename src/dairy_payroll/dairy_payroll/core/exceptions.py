class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class SettlementError(ValidationError):
    """Raised when a settlement request fails validation; nothing is written."""


class ConcurrentSettlementError(DomainError):
    """Raised when the employee changed since the settlement was computed."""
