class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class IntegrityError(DomainError):
    """Raised when a stored reference points at a record that does not exist."""
