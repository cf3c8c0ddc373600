"""Configuration settings using Pydantic Settings.

Provides typed store configuration with environment variable support.

Usage:
    from st8.config import StoreSettings

    # Load from environment variables (ST8_*)
    settings = StoreSettings()

    # Or override with explicit values
    settings = StoreSettings(copy_reads=True)
"""

from __future__ import annotations

import functools

from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for store handles.

    Attributes:
        falsy_reads_absent: Present-but-falsy data values read as None
            (empty string, 0, False, empty containers). Use `has()` for presence.
        copy_reads: Reads return a deep copy instead of the live value, so
            in-place edits on a read value never reach the store.

    Environment Variables:
        ST8_FALSY_READS_ABSENT
        ST8_COPY_READS
    """

    model_config = SettingsConfigDict(
        env_prefix="ST8_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    falsy_reads_absent: bool = True
    copy_reads: bool = False


@functools.cache
def default_settings() -> StoreSettings:
    """Process-wide settings used when `create_store` is given none.

    Read from ST8_* variables and `.env` once, on first use. Later environment
    changes need `default_settings.cache_clear()` to take effect.
    """
    return StoreSettings()
