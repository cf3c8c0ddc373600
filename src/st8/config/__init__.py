"""Configuration module using Pydantic Settings.

Usage:
    from st8.config import StoreSettings

    settings = StoreSettings(falsy_reads_absent=False)
"""

from st8.config.settings import StoreSettings, default_settings

__all__ = [
    "StoreSettings",
    "default_settings",
]
