"""Best-time benchmark loop.

Each iteration times one work unit call, re-reads the fixture, validates the
result and reports whenever the best observed time improves.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pointbench.core.comparator import validate_result
from pointbench.core.fixture import DEFAULT_FIXTURE_PATH, load_fixture

from .work_units import WorkUnit, call_work_unit, resolve_work_unit

LOGGER = logging.getLogger(__name__)

BEST_TIME_SENTINEL = 100000.0


@dataclass
class LoopState:
    """Mutable state owned by one loop run."""

    best_time: float = BEST_TIME_SENTINEL
    iterations: int = 0
    last_elapsed: float | None = None

    def record(self, elapsed: float) -> bool:
        """Record an elapsed time; return True if it is a new best."""
        self.iterations += 1
        self.last_elapsed = elapsed
        if elapsed < self.best_time:
            self.best_time = elapsed
            return True
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "best_time_seconds": self.best_time,
            "iterations": self.iterations,
            "last_elapsed_seconds": self.last_elapsed,
        }


class StopToken:
    """Thread-safe request to stop the loop after the current iteration."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def stop(self) -> None:
        self._event.set()

    @property
    def stopped(self) -> bool:
        return self._event.is_set()


def format_best_time(best_time: float) -> str:
    return f"Execution time: {best_time}"


class BenchmarkLoop:
    """Repeatedly time a work unit and track the best execution time."""

    def __init__(
        self,
        work_unit: str | WorkUnit = "stub",
        fixture_path: str = DEFAULT_FIXTURE_PATH,
        clock: Callable[[], float] = time.perf_counter,
        emit: Callable[[str], Any] = print,
    ):
        """Initialize the loop.

        Args:
            work_unit: Work unit callable, registered name or module:attribute
            fixture_path: Path of the expected-values fixture
            clock: Monotonic clock returning seconds
            emit: Sink for "Execution time" lines
        """
        self.work_unit = resolve_work_unit(work_unit)
        self.fixture_path = fixture_path
        self.clock = clock
        self.emit = emit

    async def run_once(self, state: LoopState) -> float:
        """Run a single timed, validated iteration.

        Returns:
            Elapsed seconds for the work unit call

        Raises:
            FixtureIOError, FixtureFormatError, ValidationError, WorkUnitError
        """
        start = self.clock()
        result = await call_work_unit(self.work_unit)
        elapsed = self.clock() - start

        expected = load_fixture(self.fixture_path)
        validate_result(result, expected)

        LOGGER.debug("Iteration %d took %.9fs", state.iterations + 1, elapsed)
        if state.record(elapsed):
            LOGGER.info("New best time %.9fs at iteration %d", elapsed, state.iterations)
            self.emit(format_best_time(state.best_time))
        return elapsed

    async def run(
        self,
        max_iterations: int | None = None,
        stop_token: StopToken | None = None,
        state: LoopState | None = None,
    ) -> LoopState:
        """Loop until max_iterations complete or the stop token is set.

        With neither limit the loop only ends on an error or interrupt.
        """
        if max_iterations is not None and max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")
        if state is None:
            state = LoopState()

        LOGGER.info(
            "Starting benchmark loop (fixture=%s, max_iterations=%s)",
            self.fixture_path,
            max_iterations if max_iterations is not None else "unbounded",
        )
        completed = 0
        while max_iterations is None or completed < max_iterations:
            if stop_token is not None and stop_token.stopped:
                LOGGER.info("Stop requested after %d iterations", completed)
                break
            await self.run_once(state)
            completed += 1
        return state
