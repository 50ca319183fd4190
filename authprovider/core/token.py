"""Immutable token value object built from verified claims."""
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .exceptions import TokenNotInitializedError
from .provider import Token
from .roles import ROLE_CLAIM, decode_role_claim


@dataclass(frozen=True)
class VerifiedToken(Token):
    """Parsed identity and role claims of one verification call.

    Attributes:
        uid: Provider-assigned user id (empty when not initialized)
        roles: Role claim, or None when the claim was absent
        claims: Read-only view of every verified claim
    """
    uid: str = ""
    roles: Optional[tuple[str, ...]] = None
    claims: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any], role_claim: str = ROLE_CLAIM) -> "VerifiedToken":
        """Build a token from the decoded claims returned by the provider.

        Raises:
            MalformedClaimError: If the role claim is not a list of strings
        """
        roles, present = decode_role_claim(claims, role_claim)
        uid = claims.get("uid") or claims.get("sub") or ""
        return cls(
            uid=uid,
            roles=roles if present else None,
            claims=MappingProxyType(dict(claims)),
        )

    def get_uid(self) -> str:
        if not self.uid:
            raise TokenNotInitializedError("Auth token not initialized")
        return self.uid

    def get_roles(self) -> tuple[list[str], bool]:
        if self.roles is None:
            return [], False
        return list(self.roles), True

    def has_role(self, role: str) -> bool:
        """Exact-match membership check against the role claim."""
        return role in (self.roles or ())
