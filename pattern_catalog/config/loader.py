"""Configuration loading from files and environment variables."""
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from pattern_catalog.domain.base.exceptions import ConfigurationError
from pattern_catalog.infrastructure.logging.logger import get_logger

CONFIG_FILE_ENV = "PATTERN_CATALOG_CONFIG"

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "PATTERN_CATALOG_LOG_LEVEL": ("logging", "level"),
    "PATTERN_CATALOG_LOG_DESTINATION": ("logging", "destination"),
    "PATTERN_CATALOG_OUTPUT_FORMAT": ("output", "format"),
    "PATTERN_CATALOG_HEADER_TEMPLATE": ("runner", "header_template"),
}


class ConfigurationLoader:
    """Loads raw configuration dictionaries from the supported sources."""

    def __init__(self):
        self.logger = get_logger(__name__)

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """
        Load configuration from a JSON or YAML file.

        Args:
            path: File path; ``.yaml``/``.yml`` are parsed as YAML, everything else as JSON

        Returns:
            Configuration dictionary

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with file_path.open("r", encoding="utf-8") as f:
                if file_path.suffix.lower() in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        self.logger.debug("Loaded configuration", path=path)
        return data

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from an explicit file, the env-named file, or defaults."""
        path = config_file or os.environ.get(CONFIG_FILE_ENV)
        if path:
            return self.load_from_file(path)
        return {}

    def apply_environment_overrides(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``data`` with environment overrides applied."""
        result = {key: dict(value) if isinstance(value, dict) else value for key, value in data.items()}
        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None or value == "":
                continue
            section_data = result.setdefault(section, {})
            if not isinstance(section_data, dict):
                raise ConfigurationError(f"Configuration section '{section}' must be a mapping")
            section_data[key] = value
            self.logger.debug("Applied environment override", env_var=env_var, section=section, key=key)
        return result
