"""Benchmarking module for pointbench."""

from .loop import BEST_TIME_SENTINEL, BenchmarkLoop, LoopState, StopToken, format_best_time
from .measure import MeasureBenchmark
from .work_units import (
    WORK_UNITS,
    call_work_unit,
    list_work_units,
    parse,
    register_work_unit,
    resolve_work_unit,
)

__all__ = [
    "BEST_TIME_SENTINEL",
    "BenchmarkLoop",
    "LoopState",
    "StopToken",
    "format_best_time",
    "MeasureBenchmark",
    "WORK_UNITS",
    "call_work_unit",
    "list_work_units",
    "parse",
    "register_work_unit",
    "resolve_work_unit",
]
