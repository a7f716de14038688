"""pointbench - best-time benchmark harness with fixture validation."""

__version__ = "0.1.0"

from .benchmarks import BenchmarkLoop, LoopState, MeasureBenchmark, StopToken
from .config import Config, ConfigManager
from .core import comp_floats, load_fixture, validate_result

__all__ = [
    "BenchmarkLoop",
    "LoopState",
    "MeasureBenchmark",
    "StopToken",
    "Config",
    "ConfigManager",
    "comp_floats",
    "load_fixture",
    "validate_result",
]
