"""Configuration adapters."""

from ciphertrack.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
