"""Configuration: constants and environment-backed settings."""

from confidant.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
