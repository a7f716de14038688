"""Core abstractions and base classes for pointbench."""

import numbers
from abc import ABC, abstractmethod
from typing import Any, Dict, NamedTuple

from .errors import WorkUnitError


class ResultTuple(NamedTuple):
    """Values produced by one work unit call: two sums and a line count."""

    first: float
    second: float
    lines: int

    @classmethod
    def from_raw(cls, raw: Any) -> "ResultTuple":
        """Normalize a raw work unit return value.

        Args:
            raw: Any three-element sequence (list, tuple, numpy array)

        Returns:
            ResultTuple with float, float, int fields

        Raises:
            WorkUnitError: If the value does not have the expected shape
        """
        if isinstance(raw, (str, bytes)):
            raise WorkUnitError(f"Work unit must return a 3-element sequence, got {type(raw).__name__}")
        try:
            values = list(raw)
        except TypeError as exc:
            raise WorkUnitError(f"Work unit must return a 3-element sequence, got {type(raw).__name__}") from exc
        if len(values) != 3:
            raise WorkUnitError(f"Work unit must return 3 values, got {len(values)}")
        first, second, lines = values
        try:
            first, second = float(first), float(second)
        except (TypeError, ValueError) as exc:
            raise WorkUnitError(f"Work unit returned non-numeric values: {values!r}") from exc
        return cls(first, second, _line_count(lines))


def _line_count(value: Any) -> int:
    if isinstance(value, bool):
        raise WorkUnitError(f"Work unit line count must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    raise WorkUnitError(f"Work unit line count must be an integer, got {value!r}")


class BaseBenchmark(ABC):
    """Base class for all benchmarks."""

    def __init__(self, name: str):
        """Initialize benchmark.

        Args:
            name: Name of the benchmark
        """
        self.name = name
        self.results: Dict[str, Any] = {}

    @abstractmethod
    def run(self, **kwargs) -> Dict[str, Any]:
        """Run the benchmark.

        Args:
            **kwargs: Benchmark-specific parameters

        Returns:
            Dictionary with benchmark results
        """
        pass

    def get_results(self) -> Dict[str, Any]:
        """Get benchmark results.

        Returns:
            Dictionary with the most recent results
        """
        return self.results
