class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when caller input is invalid (dates, months, payloads)."""
