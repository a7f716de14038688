"""Default configuration for pointbench."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class HarnessConfig:
    """Configuration for the benchmark loop."""

    fixture_path: str = "points-verify.txt"
    work_unit: str = "stub"
    max_iterations: Optional[int] = None  # None runs until interrupted
    best_time_sentinel: float = 100000.0


@dataclass
class MeasureConfig:
    """Configuration for averaged runs across several work units."""

    units: list = field(default_factory=lambda: ["stub"])
    runs: int = 10
    verify: bool = False


@dataclass
class LoggingConfig:
    """Configuration for harness logging."""

    level: str = "WARNING"
    log_file: Optional[str] = None


def default_sections() -> dict:
    """Return a fresh set of default configuration sections."""
    return {
        "harness": HarnessConfig(),
        "measure": MeasureConfig(),
        "logging": LoggingConfig(),
    }


DEFAULT_CONFIG = default_sections()
