"""Runtime settings loaded from ``SWITCHSHOW_*`` environment variables.

Usage:
    from switchshow.settings import get_settings

    settings = get_settings()
    print(settings.max_period)

Tests can reset the cached instance via ``get_settings.cache_clear()``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ShowSettings(BaseSettings):
    """Limits and host file locations used by the show handlers."""

    model_config = SettingsConfigDict(env_prefix="SWITCHSHOW_", extra="ignore")

    # Upper bound for the counters ``period`` option, in seconds
    max_period: int = Field(default=60, ge=0)

    # Directory holding the host-level port_config.{ini,json}
    etc_dir: str = "/etc/sonic"

    # Root of the per-platform/hwsku device directories
    device_dir: str = "/usr/share/sonic/device"


@lru_cache
def get_settings() -> ShowSettings:
    """Return the process-wide settings instance."""
    return ShowSettings()
