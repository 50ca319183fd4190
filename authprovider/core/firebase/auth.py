"""Firebase-backed implementation of the AuthProvider facade."""
from __future__ import annotations
import logging
from typing import Iterable, Optional

from ..exceptions import UserAlreadyExistsError
from ..provider import AuthProvider
from ..roles import (
    ROLE_CLAIM,
    decode_role_claim,
    dedupe_roles,
    encode_role_claim,
    merge_roles,
    remove_roles,
    validate_roles,
)
from ..token import VerifiedToken
from .client import FirebaseIdentityClient, initialize_firebase_app

logger = logging.getLogger(__name__)


class FirebaseAuth(AuthProvider):
    """AuthProvider over Firebase Authentication custom claims.

    Roles live in the ``role`` custom claim as a list of strings. Add and
    unset are read-modify-write against the provider's current claims with
    no concurrency token: concurrent writers on one uid are last-write-wins.
    """

    def __init__(self, client: FirebaseIdentityClient, role_claim: str = ROLE_CLAIM):
        """Initialize facade.

        Args:
            client: Identity client (FirebaseIdentityClient or compatible)
            role_claim: Custom claim key carrying the roles
        """
        self.client = client
        self.role_claim = role_claim

    @classmethod
    def from_settings(cls, config=None) -> "FirebaseAuth":
        """Build a facade from application settings.

        Credentials come from the configured service-account file or, when
        none is set, from the deployment's Application Default Credentials.
        """
        if config is None:
            from ...config import get_settings
            config = get_settings()

        app = initialize_firebase_app(
            credentials_path=config.credentials_path,
            project_id=config.firebase_project_id,
            name=config.firebase_app_name,
        )
        client = FirebaseIdentityClient(
            app,
            check_revoked=config.check_revoked,
            clock_skew_seconds=config.clock_skew_seconds,
        )
        return cls(client, role_claim=config.role_claim)

    def create_user(self, email: str, display_name: str) -> str:
        if self.client.get_user_by_email(email) is not None:
            raise UserAlreadyExistsError(f"User with email '{email}' already exists")

        uid = self.client.create_user(email, display_name, email_verified=False)
        logger.info(f"[create-user] Created user {uid}")
        return uid

    def verify_token(self, raw_token: str) -> VerifiedToken:
        claims = self.client.verify_token(raw_token)
        return VerifiedToken.from_claims(claims, self.role_claim)

    def set_roles(self, uid: str, roles: Iterable[str]) -> None:
        desired = dedupe_roles(validate_roles(roles))
        user = self.client.get_user(uid)
        self._write_roles(uid, user.custom_claims, desired)
        logger.info(f"[roles] Set roles {list(desired)} on {uid}")

    def add_roles(self, uid: str, roles: Iterable[str]) -> None:
        requested = validate_roles(roles)
        current, claims = self._read_roles(uid)
        updated = merge_roles(current, requested)
        self._write_roles(uid, claims, updated)
        logger.info(f"[roles] Added roles on {uid}: {list(current)} -> {list(updated)}")

    def unset_roles(self, uid: str, roles: Iterable[str]) -> None:
        requested = validate_roles(roles)
        current, claims = self._read_roles(uid)
        updated = remove_roles(current, requested)
        self._write_roles(uid, claims, updated)
        logger.info(f"[roles] Unset roles on {uid}: {list(current)} -> {list(updated)}")

    def get_roles(self, uid: str) -> tuple[list[str], bool]:
        current, present = decode_role_claim(self.client.get_user(uid).custom_claims, self.role_claim)
        return list(current), present

    def _read_roles(self, uid: str) -> tuple[tuple[str, ...], Optional[dict]]:
        user = self.client.get_user(uid)
        current, _ = decode_role_claim(user.custom_claims, self.role_claim)
        return current, user.custom_claims

    def _write_roles(self, uid: str, claims: Optional[dict], roles: Iterable[str]) -> None:
        self.client.set_custom_claims(uid, encode_role_claim(claims, roles, self.role_claim))
