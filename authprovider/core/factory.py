"""Authentication provider factory."""
from __future__ import annotations
from typing import Optional

from .provider import AuthProvider


def create_auth_provider(name: Optional[str] = None, config=None) -> AuthProvider:
    """Create an authentication provider by name.

    Args:
        name: Provider name (defaults to config.auth_provider)
        config: AppConfig instance (defaults to the loaded settings)

    Returns:
        AuthProvider instance

    Raises:
        ValueError: If the provider name is not supported
    """
    if config is None:
        from ..config import get_settings
        config = get_settings()

    provider_name = (name or config.auth_provider).lower()

    if provider_name == "firebase":
        from .firebase import FirebaseAuth
        return FirebaseAuth.from_settings(config)

    raise ValueError(f"Unsupported authentication provider: {provider_name}")
