"""
Infrastructure Configuration
============================
AppSettings is the single source of truth; it is created once by the caller
and handed to the registry factories.
"""

from .settings import AppSettings, LoggingSettings, RegistrySettings, LifecycleMode, LogLevel
from .config_loader import load_app_settings_from_json, get_settings_from_working_directory

__all__ = [
    'AppSettings',
    'LoggingSettings',
    'RegistrySettings',
    'LifecycleMode',
    'LogLevel',
    'load_app_settings_from_json',
    'get_settings_from_working_directory',
]
