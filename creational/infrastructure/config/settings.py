"""
Unified Configuration Settings
==============================
All framework configuration using Pydantic Settings.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from enum import Enum


class LogLevel(str, Enum):
    """Logging levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LifecycleMode(str, Enum):
    """Whether a resolution builds a fresh instance or reuses a cached one"""
    TRANSIENT = "transient"
    SINGLETON = "singleton"


# === LOGGING CONFIGURATION ===

class LoggingSettings(BaseSettings):
    """Logging configuration"""
    level: LogLevel = Field(default=LogLevel.INFO)
    file_enabled: bool = Field(default=False)
    console_enabled: bool = Field(default=True)
    structured_logging: bool = Field(default=True)
    log_dir: str = Field(default="logs")
    max_file_size_mb: int = Field(default=100)
    backup_count: int = Field(default=5)

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    class Config:
        env_prefix = "LOG_"


# === REGISTRY CONFIGURATION ===

class RegistrySettings(BaseSettings):
    """Creation registry configuration"""
    default_lifecycle_mode: LifecycleMode = Field(
        default=LifecycleMode.TRANSIENT,
        description="Lifecycle mode used when resolve() is called without one"
    )
    validate_on_startup: bool = Field(
        default=True,
        description="Freeze and check every (kind, variant) pair when a registry is built"
    )
    log_resolutions: bool = Field(
        default=False,
        description="Emit a debug event for every resolve() call"
    )

    @field_validator('default_lifecycle_mode', mode='before')
    @classmethod
    def normalize_mode(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    class Config:
        env_prefix = "REGISTRY_"


# === MAIN APPLICATION SETTINGS ===

class AppSettings(BaseSettings):
    """Main application settings - Single Source of Truth"""

    app_name: str = Field(default="Creational")
    version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    registry: RegistrySettings = Field(default_factory=RegistrySettings)

    class Config:
        env_file = ".env"
        env_nested_delimiter = "__"  # Allows REGISTRY__DEFAULT_LIFECYCLE_MODE=singleton
        case_sensitive = False
        extra = "ignore"
