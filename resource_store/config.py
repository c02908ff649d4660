"""
Configuration management for resource stores.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Settings shared by every resource store built in the process."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="RESOURCE_STORE_",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # HTTP transport
    api_base_url: str = Field(default="")
    request_timeout: float = Field(default=10.0, gt=0)
    auth_token: Optional[str] = Field(default=None)

    # Caching
    default_group_key: str = Field(default="default", min_length=1)


_settings: Optional[StoreSettings] = None


def get_settings() -> StoreSettings:
    """Get the process-wide settings, reading the environment on first call."""
    global _settings
    if _settings is None:
        _settings = StoreSettings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
