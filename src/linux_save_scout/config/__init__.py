"""Configuration: roots and settings."""

from linux_save_scout.config.roots import Root, Store
from linux_save_scout.config.settings import Settings, settings

__all__ = [
    "Root",
    "Store",
    "Settings",
    "settings",
]
