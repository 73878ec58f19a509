"""Configuration package."""

from commit_activity.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
