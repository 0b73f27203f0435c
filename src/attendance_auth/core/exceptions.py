from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class IdentityServiceError(DomainError):
    """Raised when the identity service rejects a request or cannot be reached."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(IdentityServiceError):
    """Raised when the identity service throttles the caller."""


class EmailDeliveryError(DomainError):
    """Raised by the e-mail provider client when a message is rejected."""
