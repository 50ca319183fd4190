"""Role-claim authentication facade over Firebase Authentication.

    from authprovider import create_auth_provider

    provider = create_auth_provider()
    uid = provider.create_user("alice@example.com", "Alice")
    provider.add_roles(uid, ["admin"])
"""
from .core.exceptions import (
    AuthProviderError,
    ClaimWriteFailedError,
    IdentityProviderError,
    InvalidInputError,
    InvalidTokenError,
    MalformedClaimError,
    TokenNotInitializedError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .core.factory import create_auth_provider
from .core.provider import AuthProvider, Token
from .core.token import VerifiedToken

__all__ = [
    "AuthProvider",
    "Token",
    "VerifiedToken",
    "create_auth_provider",
    "AuthProviderError",
    "ClaimWriteFailedError",
    "IdentityProviderError",
    "InvalidInputError",
    "InvalidTokenError",
    "MalformedClaimError",
    "TokenNotInitializedError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
]
