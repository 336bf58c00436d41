"""
Config Package - Application settings and logging setup.
"""

from config.settings import Settings, get_settings
from config.logging import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
]
