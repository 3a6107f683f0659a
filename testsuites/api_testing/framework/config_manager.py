"""
================================================================================
Configuration Manager
================================================================================

Properties-file configuration for the API test suites.

Features:
    - Loads `configuration.properties` once per process
    - Environment variable override (BASE_URL in the environment wins)
    - Fails fast when the properties resource is missing or unreadable

Properties syntax follows java.util.Properties (escapes, continuations,
# and ! comments); parsing is done by `javaproperties`.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import javaproperties
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "configuration.properties"

# Environment variable that points to an alternative properties file
CONFIG_PATH_ENV = "CONFIGURATION_FILE"

BASE_URL_KEY = "BASE_URL"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigManager:
    """
    Properties-backed configuration with environment variable override.

    Lookup order (highest to lowest priority):
        1. Environment variables (same name as the property)
        2. configuration.properties
        3. Default values

    Usage:
        >>> ConfigManager().get_base_url()
        'http://64.227.160.186:8080'

        >>> ConfigManager().get("LOG_LEVEL", "INFO")
        'INFO'
    """

    _instance: Optional["ConfigManager"] = None
    _props: Dict[str, str] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigManager":
        """Singleton - the properties file is read once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration manager.

        Args:
            config_path: Path to the properties file. Falls back to the
                        CONFIGURATION_FILE environment variable, then to
                        DEFAULT_CONFIG_PATH.

        Raises:
            ConfigurationError: When the properties file cannot be loaded
        """
        if getattr(self, "_initialized", False):
            if config_path is not None and Path(config_path) != self._config_path:
                logger.warning(
                    f"ConfigManager already loaded from {self._config_path}; "
                    f"ignoring {config_path}. Call ConfigManager.reset() to switch files."
                )
            return

        env_path = os.environ.get(CONFIG_PATH_ENV)
        self._config_path = Path(config_path or env_path or DEFAULT_CONFIG_PATH)
        self._load_properties()
        self._initialized = True

    @property
    def config_path(self) -> Path:
        return self._config_path

    def _load_properties(self) -> None:
        """Load properties from file. Missing file is fatal."""
        if not self._config_path.is_file():
            raise ConfigurationError(
                f"Unable to find properties file: {self._config_path}"
            )

        try:
            text = self._config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load properties file {self._config_path}: {e}"
            ) from e

        try:
            self._props = javaproperties.loads(text)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid properties file {self._config_path}: {e}"
            ) from e

        logger.debug(f"Loaded {len(self._props)} properties from: {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a property value.

        Args:
            key: Property name (e.g., "BASE_URL")
            default: Value returned when the key is not configured

        Returns:
            Environment value, file value or default
        """
        env_value = os.environ.get(key)
        if env_value is not None:
            return env_value
        return self._props.get(key, default)

    def get_base_url(self) -> str:
        """
        Return the base URL of the service under test.

        Raises:
            ConfigurationError: When BASE_URL is not configured
        """
        base_url = self.get(BASE_URL_KEY)
        if not base_url:
            raise ConfigurationError(
                f"{BASE_URL_KEY} is not set in {self._config_path}"
            )
        return base_url

    def reload(self) -> None:
        """Re-read the properties file."""
        self._load_properties()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    @classmethod
    def reset(cls) -> None:
        """
        Reset singleton instance.

        Useful for testing when configuration needs to be reloaded
        from a different file.
        """
        cls._instance = None
        cls._props = {}


__all__ = [
    "ConfigManager",
    "ConfigurationError",
]
