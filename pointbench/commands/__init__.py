"""Command handlers for the pointbench CLI."""

from .bench import run_bench_loop, run_bench_measure, run_units_list

__all__ = ["run_bench_loop", "run_bench_measure", "run_units_list"]
