"""Configuration management for pointbench."""

from .config import Config, ConfigManager
from .defaults import DEFAULT_CONFIG, HarnessConfig, LoggingConfig, MeasureConfig

__all__ = ["Config", "ConfigManager", "DEFAULT_CONFIG", "HarnessConfig", "LoggingConfig", "MeasureConfig"]
