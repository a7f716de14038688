"""Custom exceptions for pointbench.

This module defines harness-specific errors so callers can tell a broken
fixture from a regression in the work unit under benchmark.
"""

from typing import Any


class PointBenchError(Exception):
    """Base exception for all pointbench errors."""

    pass


class FixtureIOError(PointBenchError):
    """Raised when the fixture file is missing or cannot be read."""

    pass


class FixtureFormatError(PointBenchError):
    """Raised when fixture content is not three comma-separated numeric fields."""

    pass


class ValidationError(PointBenchError):
    """Raised when a work unit result does not match the fixture."""

    def __init__(self, field: str, expected: Any, actual: Any, message: str):
        super().__init__(message)
        self.field = field
        self.expected = expected
        self.actual = actual


class WorkUnitError(PointBenchError):
    """Raised when a work unit cannot be resolved or returns a malformed result."""

    pass


class ConfigError(PointBenchError):
    """Raised when configuration is invalid or a config file cannot be loaded."""

    pass
