"""Command-line interface for floor-conformance.

Usage:
    python -m floor_conformance run
    python -m floor_conformance run --backend jax --log-level DEBUG
    python -m floor_conformance run --config conformance.yaml
    python -m floor_conformance vectors
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd
import yaml

from .config.settings import FloorConformanceConfig, LogLevel
from .conformance.backends import get_floor_function, list_backends
from .conformance.symmetry import create_case_table
from .core.exceptions import ConfigurationError, HarnessError
from .harness.adapter import ExitStatus, run_conformance
from .harness.runtime import LoggingRuntime


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="floor-conformance",
        description="IEEE-754 conformance oracle for floor()",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run every floor() check")
    run_parser.add_argument(
        "--backend",
        choices=list_backends(),
        help="Floor implementation to validate (default: from config)",
    )
    run_parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file",
    )
    run_parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        help="Logging level override",
    )
    run_parser.add_argument(
        "--no-teardown-on-failure",
        action="store_true",
        help="Skip runtime teardown after a failed check",
    )

    subparsers.add_parser("vectors", help="Print the vector table with mirrored cases")

    return parser


def build_config(args: argparse.Namespace) -> FloorConformanceConfig:
    """Build configuration from file, environment and CLI overrides."""
    overrides = {}
    if args.log_level:
        overrides["logging"] = {"level": args.log_level}
    harness = {}
    if args.backend:
        harness["backend"] = args.backend
    if args.no_teardown_on_failure:
        harness["teardown_on_failure"] = False
    if harness:
        overrides["harness"] = harness

    return FloorConformanceConfig(config_file=args.config, **overrides)


def cmd_run(args: argparse.Namespace, argv: List[str]) -> int:
    """
    Execute the 'run' command.

    Raises:
        HarnessError: If the harness runtime fails to initialize
    """
    try:
        config = build_config(args)
        floor_fn = get_floor_function(config.harness.backend)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitStatus.FAIL
    except (ConfigurationError, ValueError, yaml.YAMLError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return ExitStatus.FAIL

    runtime = LoggingRuntime(config)
    status = run_conformance(
        runtime,
        floor_fn,
        args=argv,
        teardown_on_failure=config.harness.teardown_on_failure,
    )

    if not runtime.initialized:
        raise HarnessError(status=int(status), cause=str(runtime.init_error)) from runtime.init_error

    return status


def cmd_vectors(args: argparse.Namespace) -> int:
    """Print the vector table."""
    with pd.option_context("display.float_format", "{:.17g}".format,
                           "display.width", 120):
        print(create_case_table().to_string(index=False))
    return ExitStatus.PASS


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "run":
        try:
            return int(cmd_run(args, argv))
        except HarnessError as e:
            print(e, file=sys.stderr)
            return ExitStatus.FAIL
    elif args.command == "vectors":
        return int(cmd_vectors(args))

    parser.print_help()
    return ExitStatus.FAIL


if __name__ == "__main__":
    sys.exit(main())
