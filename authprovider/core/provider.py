"""Provider-agnostic authentication interfaces.

``AuthProvider`` is the facade upstream authorization code talks to;
``Token`` is what a successful verification hands back.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable


class Token(ABC):
    """A verified credential."""

    @abstractmethod
    def get_uid(self) -> str:
        """Return the uid of the verified user.

        Raises:
            TokenNotInitializedError: If no verified credential backs the token
        """

    @abstractmethod
    def get_roles(self) -> tuple[list[str], bool]:
        """Return the role claim and whether it was present at verification time.

        A missing claim yields ``([], False)`` and is not an error.
        """


class AuthProvider(ABC):
    """Operations an auth implementation must support."""

    @abstractmethod
    def create_user(self, email: str, display_name: str) -> str:
        """Create a user with an unverified email and return its uid.

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """

    @abstractmethod
    def verify_token(self, raw_token: str) -> Token:
        """Verify a raw ID token.

        Raises:
            InvalidTokenError: On any verification failure
        """

    @abstractmethod
    def set_roles(self, uid: str, roles: Iterable[str]) -> None:
        """Replace the user's roles with exactly ``roles`` (deduplicated)."""

    @abstractmethod
    def add_roles(self, uid: str, roles: Iterable[str]) -> None:
        """Add ``roles`` to the user's existing roles."""

    @abstractmethod
    def unset_roles(self, uid: str, roles: Iterable[str]) -> None:
        """Remove ``roles`` from the user's existing roles."""

    @abstractmethod
    def get_roles(self, uid: str) -> tuple[list[str], bool]:
        """Read the user's stored roles without a token round trip.

        Same contract as ``Token.get_roles``: ``([], False)`` when no role
        claim has been written yet.
        """
