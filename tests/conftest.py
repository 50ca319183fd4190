"""Pytest shared fixtures."""
import itertools
import pathlib
import sys

import pytest

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from authprovider.core.exceptions import (
    InvalidTokenError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from authprovider.core.firebase import FirebaseAuth, IdentityUser


# ─────────────────────────────────────────────────────────────────────────────
# In-memory identity client
# ─────────────────────────────────────────────────────────────────────────────
class FakeIdentityClient:
    """Stand-in for FirebaseIdentityClient keeping users in a dict.

    Tokens issued via ``issue_token`` carry the user's claims as they are at
    verification time, which is what a refreshed Firebase ID token shows.
    """

    def __init__(self):
        self.users: dict[str, dict] = {}
        self.tokens: dict[str, str] = {}
        self.calls: list[tuple] = []
        self._ids = itertools.count(1)

    def add_user(self, email: str, custom_claims: dict | None = None) -> str:
        uid = f"uid-{next(self._ids)}"
        self.users[uid] = {"email": email, "custom_claims": custom_claims}
        return uid

    def issue_token(self, uid: str) -> str:
        raw = f"token-for-{uid}"
        self.tokens[raw] = uid
        return raw

    def create_user(self, email: str, display_name: str, email_verified: bool = False) -> str:
        self.calls.append(("create_user", email, display_name, email_verified))
        if any(user["email"] == email for user in self.users.values()):
            raise UserAlreadyExistsError(f"User with email '{email}' already exists")
        return self.add_user(email)

    def get_user_by_email(self, email: str):
        self.calls.append(("get_user_by_email", email))
        for uid, user in self.users.items():
            if user["email"] == email:
                return IdentityUser(uid=uid, email=email, custom_claims=dict(user["custom_claims"] or {}))
        return None

    def get_user(self, uid: str) -> IdentityUser:
        self.calls.append(("get_user", uid))
        if uid not in self.users:
            raise UserNotFoundError(f"User '{uid}' not found")
        user = self.users[uid]
        return IdentityUser(uid=uid, email=user["email"], custom_claims=dict(user["custom_claims"] or {}))

    def verify_token(self, raw_token: str) -> dict:
        self.calls.append(("verify_token", raw_token))
        uid = self.tokens.get(raw_token)
        if uid is None or uid not in self.users:
            raise InvalidTokenError("Token verification failed")
        claims = {"uid": uid, "sub": uid, "email": self.users[uid]["email"]}
        claims.update(self.users[uid]["custom_claims"] or {})
        return claims

    def set_custom_claims(self, uid: str, claims: dict) -> None:
        self.calls.append(("set_custom_claims", uid, claims))
        if uid not in self.users:
            raise UserNotFoundError(f"User '{uid}' not found")
        self.users[uid]["custom_claims"] = dict(claims)


@pytest.fixture()
def identity_client():
    return FakeIdentityClient()


@pytest.fixture()
def provider(identity_client):
    return FirebaseAuth(identity_client)
