"""Average runtime comparison across several work units."""

import asyncio
import logging
import time
from typing import Any, Dict, List, Optional

import numpy as np

from pointbench.core import BaseBenchmark
from pointbench.core.comparator import validate_result
from pointbench.core.errors import ConfigError
from pointbench.core.fixture import load_fixture

from .work_units import WorkUnit, call_work_unit, resolve_work_unit

LOGGER = logging.getLogger(__name__)


class MeasureBenchmark(BaseBenchmark):
    """Run every work unit ``runs`` times and compare average runtimes."""

    def __init__(self, config=None):
        """Initialize benchmark.

        Args:
            config: Optional configuration object
        """
        super().__init__("MeasureBenchmark")
        self.config = config

    def run(
        self,
        units: Optional[Dict[str, WorkUnit]] = None,
        runs: Optional[int] = None,
        fixture_path: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Run the measurement.

        Args:
            units: Mapping of display name to work unit (defaults to config units)
            runs: Calls per unit (defaults to config)
            fixture_path: When given, every result is validated against this fixture

        Returns:
            Dictionary with averages, minimums, fastest and slowest
        """
        if units is None:
            names = self.config.measure.units if self.config else ["stub"]
            units = {name: resolve_work_unit(name) for name in names}
        if runs is None:
            runs = self.config.measure.runs if self.config else 10
        if not units:
            raise ConfigError("At least one work unit is required")
        if runs < 1:
            raise ConfigError(f"runs must be at least 1, got {runs}")

        timings = asyncio.run(self._collect(units, runs, fixture_path))

        averages = {name: float(np.mean(values)) for name, values in timings.items()}
        minimums = {name: float(np.min(values)) for name, values in timings.items()}
        fastest = min(averages, key=averages.get)
        slowest = max(averages, key=averages.get)

        self.results = {
            "runs": runs,
            "averages": averages,
            "minimums": minimums,
            "fastest": {"name": fastest, "avg_seconds": averages[fastest]},
            "slowest": {"name": slowest, "avg_seconds": averages[slowest]},
        }
        return self.results

    async def _collect(
        self, units: Dict[str, WorkUnit], runs: int, fixture_path: Optional[str]
    ) -> Dict[str, List[float]]:
        timings: Dict[str, List[float]] = {}
        for name, unit in units.items():
            LOGGER.info("Measuring %s over %d runs", name, runs)
            durations = []
            for _ in range(runs):
                start = time.perf_counter()
                result = await call_work_unit(unit)
                durations.append(time.perf_counter() - start)
                if fixture_path is not None:
                    validate_result(result, load_fixture(fixture_path))
            timings[name] = durations
        return timings
