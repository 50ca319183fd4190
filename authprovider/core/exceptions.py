"""Typed exceptions for auth provider operations."""


class AuthProviderError(Exception):
    """Base exception for all auth provider operations."""
    pass


class IdentityProviderError(AuthProviderError):
    """Unexpected failure reported by the identity provider SDK.
    
    Attributes:
        code: Provider error code (e.g. INTERNAL, UNAVAILABLE)
        message: Error message from the provider
        operation: Client operation that failed
    """
    
    def __init__(self, code: str, message: str, operation: str):
        self.code = code
        self.message = message
        self.operation = operation
        super().__init__(f"[{code}] {operation}: {message}")


class UserAlreadyExistsError(AuthProviderError):
    """User creation failed - email already registered."""
    pass


class UserNotFoundError(AuthProviderError):
    """Role operation referenced a uid the provider does not recognize."""
    pass


class InvalidTokenError(AuthProviderError):
    """Token verification failed (malformed, expired, revoked, bad signature...)."""
    pass


class ClaimWriteFailedError(AuthProviderError):
    """Writing the user's custom claims failed."""
    pass


class TokenNotInitializedError(AuthProviderError):
    """Token was built without an underlying verified credential."""
    pass


class MalformedClaimError(AuthProviderError):
    """Stored role claim is not a list of strings."""
    pass


class InvalidInputError(AuthProviderError):
    """Request argument rejected before reaching the provider (bad email, non-string role...)."""
    pass
