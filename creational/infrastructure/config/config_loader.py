"""
Configuration Loader - Bridge Between JSON Config and AppSettings
================================================================
Loads configuration from a JSON file and maps it onto AppSettings.
"""

import json
import os
import re
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

from .settings import AppSettings, LoggingSettings, RegistrySettings

# ${VAR} or ${VAR:-default}, anywhere inside a string
ENV_VAR_PATTERN = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")

DEFAULT_CONFIG_PATHS = [
    "config/config.json",
    "config.json",
]


def _resolve_env_vars(data: Any) -> Any:
    """Recursively resolves environment variable placeholders with default values support."""
    if isinstance(data, dict):
        return {k: _resolve_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars(i) for i in data]
    elif isinstance(data, str):
        def replace_env_var(match):
            return os.getenv(match.group(1), match.group(2) or "")

        return ENV_VAR_PATTERN.sub(replace_env_var, data)
    return data


def load_app_settings_from_json(config_path: str = "config/config.json") -> AppSettings:
    """
    Load AppSettings from a JSON configuration file.

    Known sections ("logging", "registry") are validated through their
    pydantic models; unknown top-level keys are ignored.

    Args:
        config_path: Path to the JSON file

    Returns:
        Configured AppSettings instance

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON object or a section is invalid
    """
    load_dotenv()

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        config_data = json.load(f)

    if not isinstance(config_data, dict):
        raise ValueError("Config file must contain a JSON object")

    resolved: Dict[str, Any] = _resolve_env_vars(config_data)

    # Passed through the constructor so substituted strings are validated
    overrides: Dict[str, Any] = {
        key: resolved[key] for key in ('app_name', 'version', 'debug') if key in resolved
    }

    if 'logging' in resolved:
        overrides['logging'] = LoggingSettings(**resolved['logging'])

    if 'registry' in resolved:
        overrides['registry'] = RegistrySettings(**resolved['registry'])

    return AppSettings(**overrides)


def get_settings_from_working_directory() -> AppSettings:
    """
    Load settings from the first config file found in the working directory.

    Returns:
        Configured AppSettings instance, or defaults when no file exists
    """
    for config_path in DEFAULT_CONFIG_PATHS:
        if Path(config_path).exists():
            return load_app_settings_from_json(config_path)

    return AppSettings()
