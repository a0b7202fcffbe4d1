"""Unified configuration management for the application."""
from __future__ import annotations

import threading
from typing import Any, Optional

from pattern_catalog.config.loader import ConfigurationLoader
from pattern_catalog.config.schemas import (
    AppConfig,
    LoggingConfig,
    OutputConfig,
    RunnerConfig,
    validate_config,
)


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is resolved lazily on first access from, in order of
    precedence: environment overrides, the configuration file, defaults.
    """

    def __init__(self, config_file: Optional[str] = None, loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = loader

    @property
    def loader(self) -> ConfigurationLoader:
        """Lazy load configuration loader."""
        if self._loader is None:
            self._loader = ConfigurationLoader()
        return self._loader

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data = self.loader.load_configuration(self._config_file)
        config_data = self.loader.apply_environment_overrides(config_data)
        return validate_config(config_data)

    @property
    def logging(self) -> LoggingConfig:
        return self.app_config.logging

    @property
    def runner(self) -> RunnerConfig:
        return self.app_config.runner

    @property
    def output(self) -> OutputConfig:
        return self.app_config.output

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dotted path, e.g. ``logging.level``."""
        current: Any = self.app_config.to_dict()
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None
