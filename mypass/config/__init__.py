"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from mypass.config.settings import settings

    db_url = settings.DATABASE_URL
    ttl = settings.CACHE_TIME_TO_LIVE_SECONDS
"""

from mypass.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
