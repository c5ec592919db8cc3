"""Configuration management for helperkit."""

from pathlib import Path
from typing import Dict, Any, Optional

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # API keys
    exchange_rate_api_key: Optional[str] = Field(None, description="exchangerate-api.com v6 key")
    exchangerates_access_key: Optional[str] = Field(None, description="exchangeratesapi.io access key")
    opencage_api_key: Optional[str] = Field(None, description="OpenCage geocoder key")

    log_level: str = "INFO"

    # HTTP settings
    http_timeout: int = 30
    user_agent: str = "helperkit/0.1.0"


_settings: Optional[Settings] = None
_config_data: Optional[Dict[str, Any]] = None


def load_config(config_file: str = "configs/default.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file."""
    global _config_data

    if _config_data is None:
        config_path = Path(config_file)
        if config_path.exists():
            with open(config_path, 'r') as f:
                _config_data = yaml.safe_load(f) or {}
        else:
            _config_data = {}

    return _config_data


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def get_config(key_path: str, default: Any = None) -> Any:
    """Get configuration value by dot-separated key path.

    Args:
        key_path: Dot-separated path like 'apis.opencage.base_url'
        default: Default value if key not found

    Returns:
        Configuration value or default
    """
    value = load_config()
    for key in key_path.split('.'):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


def reset_settings():
    """Drop cached settings and YAML config so the next access reloads them."""
    global _settings, _config_data
    _settings = None
    _config_data = None
