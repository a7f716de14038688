"""Command-line interface for pointbench."""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from pointbench import __version__
from pointbench.commands import run_bench_loop, run_bench_measure, run_units_list
from pointbench.config import Config, ConfigManager
from pointbench.config.config_io import save_data_file
from pointbench.core.errors import PointBenchError

try:
    POINTBENCH_CLI_VERSION = package_version("pointbench")
except PackageNotFoundError:
    POINTBENCH_CLI_VERSION = __version__

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def setup_parser() -> argparse.ArgumentParser:
    """Setup command-line argument parser.

    Returns:
        ArgumentParser configured for pointbench
    """
    parser = argparse.ArgumentParser(
        prog="pointbench",
        description="pointbench - best-time benchmark harness",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Loop forever, printing each new best time
  pointbench run --fixture points-verify.txt

  # Bounded run with a custom work unit, exporting the final state
  pointbench run --work-unit mypkg.parsers:parse --iterations 100 --output best.json

  # Average runtimes across work units
  pointbench measure --units stub,mypkg.parsers:parse --runs 20 --verify
""",
    )
    parser.add_argument("--version", action="version", version=f"pointbench {POINTBENCH_CLI_VERSION}")
    parser.add_argument("--config", help="Configuration file (YAML or JSON)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Logging level (default from config)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    run_parser = subparsers.add_parser("run", help="Time a work unit repeatedly and report the best time")
    run_parser.add_argument("--fixture", help="Expected values file (default: points-verify.txt)")
    run_parser.add_argument("--work-unit", help="Registered name or module:attribute")
    run_parser.add_argument("--iterations", type=_positive_int, help="Stop after N iterations")
    run_parser.add_argument("--output", help="Write the final loop state to JSON/YAML")

    measure_parser = subparsers.add_parser("measure", help="Compare average runtimes of work units")
    measure_parser.add_argument("--units", help="Comma-separated work units")
    measure_parser.add_argument("--runs", type=_positive_int, help="Calls per work unit")
    measure_parser.add_argument("--verify", action="store_true", help="Validate each result against the fixture")
    measure_parser.add_argument("--fixture", help="Expected values file used with --verify")
    measure_parser.add_argument("--output", help="Write results to JSON/YAML")

    subparsers.add_parser("units", help="List registered work units")

    return parser


def configure_logging(config: Config, level: str | None = None) -> None:
    """Configure root logging on stderr, plus a log file when configured."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.logging.log_file:
        handlers.append(logging.FileHandler(config.logging.log_file))
    logging.basicConfig(
        level=(level or config.logging.level).upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = ConfigManager.load_or_default(args.config)
    except PointBenchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    configure_logging(config, args.log_level)

    result = None
    try:
        if args.command == "units":
            return run_units_list(args)
        elif args.command == "run":
            result = run_bench_loop(args, config)
        elif args.command == "measure":
            result = run_bench_measure(args, config)
    except PointBenchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nBenchmark interrupted by user", file=sys.stderr)
        return 130

    if getattr(args, "output", None) and result:
        save_data_file(args.output, result)
        print(f"[OK] Results saved to: {args.output}")

    if result and result.get("interrupted"):
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
