class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a record (or resource) with the given identifier does not exist."""


class MethodNotAllowedError(DomainError):
    """Raised when a resource is asked for an operation it does not support."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Method {method} Not Allowed")


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""
