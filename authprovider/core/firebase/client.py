"""Thin client over the Firebase Admin SDK user and token APIs.

Handles app initialization and translates SDK exceptions into the typed
exceptions of ``authprovider.core.exceptions``.
"""
from __future__ import annotations
import hashlib
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import firebase_admin
from firebase_admin import auth, credentials
from firebase_admin.exceptions import FirebaseError

from ..exceptions import (
    ClaimWriteFailedError,
    IdentityProviderError,
    InvalidInputError,
    InvalidTokenError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "[DEFAULT]"


@dataclass(frozen=True)
class IdentityUser:
    """User record as seen by this layer."""
    uid: str
    email: Optional[str] = None
    custom_claims: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record) -> "IdentityUser":
        return cls(
            uid=record.uid,
            email=record.email,
            custom_claims=dict(record.custom_claims or {}),
        )


def _fingerprint(raw_token: str) -> str:
    """Short SHA-256 prefix so tokens can be correlated in logs without leaking them."""
    return hashlib.sha256(raw_token.encode("utf-8")).hexdigest()[:12]


def _provider_error(exc: FirebaseError, operation: str) -> IdentityProviderError:
    return IdentityProviderError(str(exc.code), str(exc), operation)


def initialize_firebase_app(
    credentials_path: str = "",
    project_id: str = "",
    name: str = DEFAULT_APP_NAME,
) -> firebase_admin.App:
    """Return the named Firebase app, initializing it on first use.

    Without a service-account path the SDK resolves Application Default
    Credentials (GOOGLE_APPLICATION_CREDENTIALS, metadata server...).

    Args:
        credentials_path: Optional path to a service-account JSON file
        project_id: Optional explicit project id
        name: Firebase app name

    Returns:
        Initialized firebase_admin.App
    """
    try:
        return firebase_admin.get_app(name)
    except ValueError:
        pass

    if credentials_path:
        credential = credentials.Certificate(credentials_path)
    else:
        credential = credentials.ApplicationDefault()
    options = {"projectId": project_id} if project_id else None

    app = firebase_admin.initialize_app(credential, options=options, name=name)
    logger.info(f"[firebase] Initialized app '{name}' (project={project_id or '<ambient>'})")
    return app


class FirebaseIdentityClient:
    """Identity client backed by ``firebase_admin.auth``.

    Usage:
        app = initialize_firebase_app()
        client = FirebaseIdentityClient(app)
        user = client.get_user_by_email("alice@example.com")
    """

    def __init__(
        self,
        app: Optional[firebase_admin.App] = None,
        *,
        check_revoked: bool = False,
        clock_skew_seconds: int = 0,
    ):
        """Initialize client.

        Args:
            app: Firebase app (None uses the SDK default app)
            check_revoked: Also reject revoked tokens and disabled users on verification
            clock_skew_seconds: Tolerated clock skew for iat/exp checks (0-60)
        """
        self.app = app
        self.check_revoked = check_revoked
        self.clock_skew_seconds = clock_skew_seconds

    def create_user(self, email: str, display_name: str, email_verified: bool = False) -> str:
        """Create a user record and return its uid.

        Raises:
            UserAlreadyExistsError: If the provider already holds the email
            InvalidInputError: If the SDK rejects the email or display name
            IdentityProviderError: On any other provider error
        """
        try:
            record = auth.create_user(
                email=email,
                display_name=display_name,
                email_verified=email_verified,
                app=self.app,
            )
        except auth.EmailAlreadyExistsError as exc:
            raise UserAlreadyExistsError(f"User with email '{email}' already exists") from exc
        except ValueError as exc:
            raise InvalidInputError(f"Cannot create user '{email}': {exc}") from exc
        except FirebaseError as exc:
            raise _provider_error(exc, "create_user") from exc
        return record.uid

    def get_user_by_email(self, email: str) -> Optional[IdentityUser]:
        """Return the user registered under ``email`` or None if not found.

        Raises:
            InvalidInputError: If the SDK rejects the email
        """
        try:
            record = auth.get_user_by_email(email, app=self.app)
        except auth.UserNotFoundError:
            return None
        except ValueError as exc:
            raise InvalidInputError(f"Invalid email '{email}': {exc}") from exc
        except FirebaseError as exc:
            raise _provider_error(exc, "get_user_by_email") from exc
        return IdentityUser.from_record(record)

    def get_user(self, uid: str) -> IdentityUser:
        """Return the user identified by ``uid``.

        Raises:
            UserNotFoundError: If the uid does not resolve
            IdentityProviderError: On any other provider error
        """
        try:
            record = auth.get_user(uid, app=self.app)
        except auth.UserNotFoundError as exc:
            raise UserNotFoundError(f"User '{uid}' not found") from exc
        except ValueError as exc:
            # The SDK rejects empty or over-long uids before any lookup
            raise UserNotFoundError(f"User '{uid}' not found: {exc}") from exc
        except FirebaseError as exc:
            raise _provider_error(exc, "get_user") from exc
        return IdentityUser.from_record(record)

    def verify_token(self, raw_token: str) -> Dict[str, Any]:
        """Verify an ID token and return its decoded claims.

        Raises:
            InvalidTokenError: On any verification failure
        """
        try:
            return auth.verify_id_token(
                raw_token,
                app=self.app,
                check_revoked=self.check_revoked,
                clock_skew_seconds=self.clock_skew_seconds,
            )
        except (ValueError, FirebaseError) as exc:
            fingerprint = _fingerprint(raw_token) if isinstance(raw_token, str) else "<non-string>"
            logger.warning(f"[verify] Token {fingerprint} rejected: {type(exc).__name__}")
            raise InvalidTokenError(f"Token verification failed: {exc}") from exc

    def set_custom_claims(self, uid: str, claims: Dict[str, Any]) -> None:
        """Replace the user's custom claims document.

        Raises:
            UserNotFoundError: If the uid does not resolve
            ClaimWriteFailedError: On any other write failure
        """
        try:
            auth.set_custom_user_claims(uid, claims, app=self.app)
        except auth.UserNotFoundError as exc:
            raise UserNotFoundError(f"User '{uid}' not found") from exc
        except (ValueError, FirebaseError) as exc:
            raise ClaimWriteFailedError(f"Failed to write claims for '{uid}': {exc}") from exc
