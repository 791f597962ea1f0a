class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when sign-in credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class StorageParseError(DomainError):
    """Raised when a stored blob cannot be decoded into domain objects."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Could not parse stored value for '{key}': {reason}")
        self.key = key
