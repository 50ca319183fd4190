"""Role-set helpers for the ``role`` custom claim.

Roles travel as an ordered JSON list but are treated as a set: every helper
deduplicates, keeps first-seen order so writes are deterministic, and returns
a fresh tuple without touching its inputs.
"""
from __future__ import annotations
from typing import Any, Iterable, Mapping, Optional

from .exceptions import InvalidInputError, MalformedClaimError

ROLE_CLAIM = "role"


def validate_roles(roles: Iterable[str]) -> tuple[str, ...]:
    """Check requested roles and return them as a tuple.

    A bare string is rejected rather than iterated character by character.

    Raises:
        InvalidInputError: If roles is a str/bytes or holds a non-string entry
    """
    if isinstance(roles, (str, bytes)):
        raise InvalidInputError(f"Roles must be a sequence of strings, got a single {type(roles).__name__}")
    try:
        requested = tuple(roles)
    except TypeError:
        raise InvalidInputError(f"Roles must be a sequence of strings, got {type(roles).__name__}")
    for role in requested:
        if not isinstance(role, str):
            raise InvalidInputError(f"Role names must be strings, got {type(role).__name__}")
    return requested


def dedupe_roles(roles: Iterable[str]) -> tuple[str, ...]:
    """Return roles without duplicates, preserving first occurrence order."""
    seen: set[str] = set()
    unique = []
    for role in roles:
        if role in seen:
            continue
        seen.add(role)
        unique.append(role)
    return tuple(unique)


def merge_roles(current: Iterable[str], additions: Iterable[str]) -> tuple[str, ...]:
    """Union of current and added roles (current entries first)."""
    return dedupe_roles([*current, *additions])


def remove_roles(current: Iterable[str], removals: Iterable[str]) -> tuple[str, ...]:
    """Drop every entry matching one of the removals; absent removals are ignored."""
    targets = set(removals)
    return tuple(role for role in dedupe_roles(current) if role not in targets)


def decode_role_claim(
    claims: Optional[Mapping[str, Any]],
    claim: str = ROLE_CLAIM,
) -> tuple[tuple[str, ...], bool]:
    """Extract the role list from a claims mapping.

    Args:
        claims: Custom claims or verified token claims (None means no claims)
        claim: Claim key carrying the roles

    Returns:
        Tuple of (deduplicated roles, claim present)

    Raises:
        MalformedClaimError: If the claim is present but not a list of strings
    """
    if not claims or claim not in claims:
        return (), False

    value = claims[claim]
    if not isinstance(value, (list, tuple)):
        raise MalformedClaimError(
            f"Claim '{claim}' must be a list of strings, got {type(value).__name__}"
        )
    for entry in value:
        if not isinstance(entry, str):
            raise MalformedClaimError(
                f"Claim '{claim}' contains non-string entry of type {type(entry).__name__}"
            )
    return dedupe_roles(value), True


def encode_role_claim(
    claims: Optional[Mapping[str, Any]],
    roles: Iterable[str],
    claim: str = ROLE_CLAIM,
) -> dict[str, Any]:
    """Build a new custom claims document with the role list replaced.

    Other keys in ``claims`` are carried over unchanged.
    """
    document = dict(claims or {})
    document[claim] = list(dedupe_roles(roles))
    return document
