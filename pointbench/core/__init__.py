"""Core module for pointbench."""

from .base import BaseBenchmark, ResultTuple
from .comparator import FLOAT_PRECISION, comp_floats, validate_result
from .errors import (
    ConfigError,
    FixtureFormatError,
    FixtureIOError,
    PointBenchError,
    ValidationError,
    WorkUnitError,
)
from .fixture import DEFAULT_FIXTURE_PATH, ExpectedFixture, load_fixture, parse_fixture_text

__all__ = [
    "BaseBenchmark",
    "ResultTuple",
    "FLOAT_PRECISION",
    "comp_floats",
    "validate_result",
    # Errors
    "PointBenchError",
    "FixtureIOError",
    "FixtureFormatError",
    "ValidationError",
    "WorkUnitError",
    "ConfigError",
    # Fixture
    "DEFAULT_FIXTURE_PATH",
    "ExpectedFixture",
    "load_fixture",
    "parse_fixture_text",
]
