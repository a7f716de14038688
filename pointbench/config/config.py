"""Configuration management system for pointbench."""

import math
import os
from dataclasses import asdict, fields, replace
from typing import Any, Dict, Optional

import yaml

from pointbench.core.errors import ConfigError

from .config_io import (
    is_yaml_path,
    load_json_file,
    load_yaml_file,
    save_json_file,
    save_yaml_file,
)
from .defaults import HarnessConfig, LoggingConfig, MeasureConfig, default_sections


class Config:
    """Unified configuration container for pointbench."""

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """Initialize configuration.

        Args:
            config_dict: Optional dictionary to override defaults
        """
        self.config = default_sections()
        if config_dict:
            self.update(config_dict)

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration with provided values.

        Args:
            config_dict: Mapping of section name to a dict of overrides

        Raises:
            ConfigError: On unknown sections or keys
        """
        if not isinstance(config_dict, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(config_dict).__name__}")
        for key, value in config_dict.items():
            if key not in self.config:
                raise ConfigError(f"Unknown configuration section '{key}'")
            if not isinstance(value, dict):
                raise ConfigError(f"Configuration section '{key}' must be a mapping")
            section = self.config[key]
            known = {f.name for f in fields(section)}
            unknown = sorted(set(value) - known)
            if unknown:
                raise ConfigError(f"Unknown keys in '{key}': {', '.join(unknown)}")
            self.config[key] = replace(section, **value)
        self._check()

    def _check(self) -> None:
        max_iterations = self.harness.max_iterations
        runs = self.measure.runs
        if max_iterations is not None and (not isinstance(max_iterations, int) or max_iterations < 1):
            raise ConfigError(f"harness.max_iterations must be a positive integer, got {max_iterations!r}")
        if not isinstance(runs, int) or runs < 1:
            raise ConfigError(f"measure.runs must be a positive integer, got {runs!r}")
        sentinel = _positive_float("harness.best_time_sentinel", self.harness.best_time_sentinel)
        self.config["harness"] = replace(self.harness, best_time_sentinel=sentinel)
        if isinstance(self.measure.units, str):
            self.config["measure"] = replace(self.measure, units=[u.strip() for u in self.measure.units.split(",")])

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key.

        Args:
            key: Configuration key (e.g., 'harness.fixture_path')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        section_name, _, attr = key.partition(".")
        section = self.config.get(section_name)
        if section is None:
            return default
        if not attr:
            return section
        value = getattr(section, attr, None)
        return value if value is not None else default

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {key: asdict(value) for key, value in self.config.items()}

    @property
    def harness(self) -> HarnessConfig:
        """Get benchmark loop configuration."""
        return self.config["harness"]

    @property
    def measure(self) -> MeasureConfig:
        """Get measure configuration."""
        return self.config["measure"]

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.config["logging"]


def _positive_float(key: str, value: Any) -> float:
    # YAML 1.1 loads exponent-only numbers such as 1e5 as strings.
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be a positive number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be a positive number, got {value!r}") from exc
    if not math.isfinite(number) or number <= 0:
        raise ConfigError(f"{key} must be a positive number, got {value!r}")
    return number


class ConfigManager:
    """Manages loading and saving configuration files."""

    @staticmethod
    def load_yaml(filepath: str) -> Config:
        """Load configuration from YAML file."""
        try:
            config_dict = load_yaml_file(filepath)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot load config {filepath}: {exc}") from exc
        return Config(config_dict or {})

    @staticmethod
    def load_json(filepath: str) -> Config:
        """Load configuration from JSON file."""
        try:
            config_dict = load_json_file(filepath)
        except (OSError, ValueError) as exc:
            raise ConfigError(f"Cannot load config {filepath}: {exc}") from exc
        return Config(config_dict or {})

    @staticmethod
    def save_yaml(config: Config, filepath: str) -> None:
        """Save configuration to YAML file."""
        save_yaml_file(filepath, config.to_dict())

    @staticmethod
    def save_json(config: Config, filepath: str) -> None:
        """Save configuration to JSON file."""
        save_json_file(filepath, config.to_dict())

    @staticmethod
    def load_or_default(filepath: Optional[str] = None) -> Config:
        """Load configuration from file or return defaults.

        Args:
            filepath: Optional path to configuration file

        Returns:
            Config object (loaded from file or defaults)

        Raises:
            ConfigError: If the file exists but has an unsupported extension
        """
        if filepath and os.path.exists(filepath):
            if is_yaml_path(filepath):
                return ConfigManager.load_yaml(filepath)
            elif filepath.endswith(".json"):
                return ConfigManager.load_json(filepath)
            raise ConfigError(f"Unsupported config file type: {filepath}")
        return Config()
