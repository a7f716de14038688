"""Benchmark command handlers for pointbench CLI."""

from __future__ import annotations

import asyncio
import signal
import sys
from typing import Any

from pointbench.benchmarks import (
    BenchmarkLoop,
    LoopState,
    MeasureBenchmark,
    StopToken,
    list_work_units,
    resolve_work_unit,
)
from pointbench.config import Config


def run_bench_loop(args: Any, config: Config) -> dict[str, Any]:
    """Run the best-time loop until the iteration limit or Ctrl-C."""
    harness = config.harness
    fixture_path = args.fixture or harness.fixture_path
    work_unit = args.work_unit or harness.work_unit
    max_iterations = args.iterations if args.iterations is not None else harness.max_iterations

    loop = BenchmarkLoop(work_unit=work_unit, fixture_path=fixture_path)
    state = LoopState(best_time=harness.best_time_sentinel)
    stop_token = StopToken()

    # SIGTERM finishes the current iteration, Ctrl-C aborts it.
    previous_handler = signal.signal(signal.SIGTERM, lambda _signum, _frame: stop_token.stop())
    interrupted = False
    try:
        asyncio.run(loop.run(max_iterations=max_iterations, stop_token=stop_token, state=state))
    except KeyboardInterrupt:
        interrupted = True
        print("\nBenchmark interrupted by user", file=sys.stderr)
    finally:
        signal.signal(signal.SIGTERM, previous_handler)

    result = state.to_dict()
    result.update(
        {
            "work_unit": work_unit if isinstance(work_unit, str) else repr(work_unit),
            "fixture": fixture_path,
            "interrupted": interrupted,
        }
    )
    return result


def run_bench_measure(args: Any, config: Config) -> dict[str, Any]:
    """Run averaged measurements across work units and print a summary table."""
    names = [n.strip() for n in args.units.split(",") if n.strip()] if args.units else list(config.measure.units)
    runs = args.runs if args.runs is not None else config.measure.runs
    verify = args.verify or config.measure.verify
    fixture_path = (args.fixture or config.harness.fixture_path) if verify else None

    units = {name: resolve_work_unit(name) for name in names}
    benchmark = MeasureBenchmark(config)
    results = benchmark.run(units=units, runs=runs, fixture_path=fixture_path)

    print("\nAverage Runtimes")
    print("=" * 60)
    print(f"{'Work unit':<30} {'Avg (s)':<15} {'Min (s)':<15}")
    print("-" * 60)
    for name, avg in results["averages"].items():
        print(f"{name:<30} {avg:<15.9f} {results['minimums'][name]:<15.9f}")

    fastest = results["fastest"]
    slowest = results["slowest"]
    print(f"\nFastest: {fastest['name']} with avg time {fastest['avg_seconds']:.9f}s")
    print(f"Slowest: {slowest['name']} with avg time {slowest['avg_seconds']:.9f}s")
    return results


def run_units_list(_args: Any) -> int:
    """Print registered work unit names."""
    for name in list_work_units():
        print(name)
    return 0
