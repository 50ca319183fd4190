"""Configuration module for the auth provider."""
from .settings import AppConfig, load_settings, get_settings

__all__ = ["AppConfig", "load_settings", "get_settings"]
