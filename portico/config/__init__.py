"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from portico.config.settings import settings

    port = settings.PORT
    is_dev = settings.is_development
"""

from portico.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
