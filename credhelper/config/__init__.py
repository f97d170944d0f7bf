"""Configuration module for credhelper.

- Settings: Environment variable configuration
"""

from credhelper.config.settings import Settings, get_settings, reset_settings, set_settings

__all__ = ["Settings", "get_settings", "reset_settings", "set_settings"]
