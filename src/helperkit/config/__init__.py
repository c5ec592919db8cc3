"""Configuration management for helperkit."""

from .settings import Settings, get_settings, get_config, load_config, reset_settings

__all__ = ["Settings", "get_settings", "get_config", "load_config", "reset_settings"]
