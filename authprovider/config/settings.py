"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import functools
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("firebase",)
MAX_CLOCK_SKEW_SECONDS = 60


def _resolve_credentials_path() -> str:
    """Locate a service-account JSON file; empty string means Application Default Credentials.

    Priority:
    1. /run/secrets/firebase_service_account (mounted file)
    2. GOOGLE_APPLICATION_CREDENTIALS
    """
    mounted = Path("/run/secrets") / "firebase_service_account"
    if mounted.exists() and mounted.is_file():
        return str(mounted)
    return os.environ.get("GOOGLE_APPLICATION_CREDENTIALS", "").strip()


def _env_flag(var_name: str, default: str = "false") -> bool:
    return os.environ.get(var_name, default).strip().lower() == "true"


def _env_int(var_name: str, default: int) -> int:
    raw = os.environ.get(var_name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {var_name} must be an integer, got '{raw}'")


@dataclass
class AppConfig:
    """Application configuration container."""
    # Provider selection
    auth_provider: str = "firebase"

    # Firebase
    firebase_project_id: str = ""
    firebase_app_name: str = "[DEFAULT]"
    credentials_path: str = ""

    # Token verification
    check_revoked: bool = False
    clock_skew_seconds: int = 0

    # Claims
    role_claim: str = "role"


def load_settings() -> AppConfig:
    """Load application settings from environment and /run/secrets."""
    auth_provider = os.environ.get("AUTH_PROVIDER", "firebase").strip().lower()
    if auth_provider not in SUPPORTED_PROVIDERS:
        raise RuntimeError(
            f"AUTH_PROVIDER '{auth_provider}' is not supported (expected one of {', '.join(SUPPORTED_PROVIDERS)})."
        )

    firebase_project_id = (
        os.environ.get("FIREBASE_PROJECT_ID")
        or os.environ.get("GOOGLE_CLOUD_PROJECT")
        or ""
    ).strip()
    firebase_app_name = os.environ.get("FIREBASE_APP_NAME", "[DEFAULT]").strip() or "[DEFAULT]"
    credentials_path = _resolve_credentials_path()
    if credentials_path and not Path(credentials_path).is_file():
        raise RuntimeError(f"Service account file '{credentials_path}' does not exist.")

    check_revoked = _env_flag("FIREBASE_CHECK_REVOKED")
    clock_skew_seconds = _env_int("FIREBASE_CLOCK_SKEW_SECONDS", 0)
    if not 0 <= clock_skew_seconds <= MAX_CLOCK_SKEW_SECONDS:
        raise ValueError(
            f"FIREBASE_CLOCK_SKEW_SECONDS must be between 0 and {MAX_CLOCK_SKEW_SECONDS}, got {clock_skew_seconds}"
        )

    role_claim = os.environ.get("ROLE_CLAIM", "role").strip()
    if not role_claim:
        raise ValueError("ROLE_CLAIM must not be empty")

    credential_label = credentials_path or "application-default"
    logger.info(
        f"[settings] provider={auth_provider}; project={firebase_project_id or '<ambient>'}; "
        f"credentials={credential_label}; check_revoked={check_revoked}"
    )

    return AppConfig(
        auth_provider=auth_provider,
        firebase_project_id=firebase_project_id,
        firebase_app_name=firebase_app_name,
        credentials_path=credentials_path,
        check_revoked=check_revoked,
        clock_skew_seconds=clock_skew_seconds,
        role_claim=role_claim,
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> AppConfig:
    """Return the process-wide settings, loading them on first use."""
    return load_settings()
