"""Application entry point and CLI for space-scanner.

This module implements the command-line host for the scanning core:
argument parsing, optional configuration loading, logging setup, and
rendering of volumes and directory listings as tables or JSON.

Commands:
- volumes: list mounted storage volumes with capacity
- list PATH: list the children of a directory with depth-limited sizes
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from space_scanner.core.config import (
    ConfigurationError,
    MainConfig,
    OutputFormat,
    load_main_config,
)
from space_scanner.core.errors import ScanError
from space_scanner.core.filesystem import list_directory, list_volumes
from space_scanner.utils.formatting import render_entries, render_volumes
from space_scanner.utils.logging import configure_logging, new_scan_id, set_scan_id

__all__ = ["main", "run"]

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_SCAN_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the space-scanner command.

    CLI Arguments:
        --config, -c: Path to YAML configuration file
        --log-level: Override log level from config
        --syslog: Also log to syslog
        --format: Output format (table or json)
        --raw-sizes: Print raw byte counts in tables
    """
    parser = argparse.ArgumentParser(
        prog="space-scanner",
        description="List storage volumes and size-annotated directory contents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  space-scanner volumes
  space-scanner list ~/Downloads
  space-scanner --format json list /srv/data
  space-scanner --config scanner.yaml --log-level DEBUG list .
        """,
    )

    _ = parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: built-in defaults)",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override log level from configuration",
        metavar="LEVEL",
    )

    _ = parser.add_argument(
        "--syslog",
        action="store_true",
        help="Also send log records to syslog (overrides config)",
    )

    _ = parser.add_argument(
        "--format",
        type=OutputFormat,
        choices=list(OutputFormat),
        help="Output format (overrides config)",
    )

    _ = parser.add_argument(
        "--raw-sizes",
        action="store_true",
        help="Print sizes as raw byte counts in tables",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    volumes_parser = subparsers.add_parser("volumes", help="List mounted storage volumes")
    _ = volumes_parser.add_argument(
        "--all",
        dest="all_partitions",
        action="store_true",
        help="Include pseudo, memory and duplicate filesystems",
    )

    list_parser = subparsers.add_parser("list", help="List a directory with sizes")
    _ = list_parser.add_argument("path", type=str, help="Directory to list")

    return parser


def load_config(config_path: Path | None) -> MainConfig:
    """Load configuration from a file, or return defaults when no path is given."""
    if config_path is None:
        return MainConfig()
    return load_main_config(config_path)


def apply_overrides(config: MainConfig, args: argparse.Namespace) -> MainConfig:
    """Return a copy of ``config`` with command-line overrides applied."""
    log_level: str | None = args.log_level  # pyright: ignore[reportAny]  # argparse boundary
    syslog: bool = args.syslog  # pyright: ignore[reportAny]  # argparse boundary
    output_format: OutputFormat | None = args.format  # pyright: ignore[reportAny]  # argparse boundary
    raw_sizes: bool = args.raw_sizes  # pyright: ignore[reportAny]  # argparse boundary
    all_partitions: bool = getattr(args, "all_partitions", False)

    application = config.application.model_copy(
        update={
            "log_level": log_level or config.application.log_level,
            "syslog_enabled": syslog or config.application.syslog_enabled,
        }
    )
    output = config.output.model_copy(
        update={
            "format": output_format or config.output.format,
            "human_readable": config.output.human_readable and not raw_sizes,
        }
    )
    volumes = config.volumes.model_copy(
        update={"all_partitions": all_partitions or config.volumes.all_partitions}
    )
    return config.model_copy(update={"application": application, "output": output, "volumes": volumes})


def print_json(payload: object) -> None:
    # ASCII escapes keep undecodable filenames (lone surrogates) writable
    print(json.dumps(payload, indent=2, ensure_ascii=True))


def cmd_volumes(config: MainConfig) -> int:
    volumes = list_volumes(all_partitions=config.volumes.all_partitions)

    if config.output.format is OutputFormat.JSON:
        print_json([volume.to_dict() for volume in volumes])
    elif volumes:
        print(render_volumes(volumes, human_readable=config.output.human_readable))
    else:
        print("No volumes found")

    return EXIT_SUCCESS


def cmd_list(config: MainConfig, path: str) -> int:
    logger = logging.getLogger(__name__)

    try:
        entries = list_directory(path)
    except ScanError as exc:
        logger.info("Listing failed", extra={"path": exc.path, "kind": exc.kind.value})
        if config.output.format is OutputFormat.JSON:
            print_json({"error": exc.to_dict()})
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_SCAN_ERROR

    if config.output.format is OutputFormat.JSON:
        print_json([entry.to_dict() for entry in entries])
    elif entries:
        print(render_entries(entries, human_readable=config.output.human_readable))
    else:
        print("(empty)")

    return EXIT_SUCCESS


def run(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit code.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv[1:]``)

    Returns:
        0 on success, 1 on configuration error, 2 on a path-level scan error
    """
    args = build_parser().parse_args(argv)
    config_path: Path | None = args.config  # pyright: ignore[reportAny]  # argparse boundary
    command: str = args.command  # pyright: ignore[reportAny]  # argparse boundary

    try:
        config = apply_overrides(load_config(config_path), args)
    except ConfigurationError as exc:
        print(f"Configuration error:\n{exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(
        log_level=config.application.log_level,
        enable_syslog=config.application.syslog_enabled,
    )
    set_scan_id(new_scan_id())

    logger = logging.getLogger(__name__)
    logger.debug("Running command", extra={"command": command})

    if command == "volumes":
        return cmd_volumes(config)

    path: str = args.path  # pyright: ignore[reportAny]  # argparse boundary
    return cmd_list(config, path)


def main() -> NoReturn:
    """Main entry point for the space-scanner console script.

    Exit Codes:
        0: Success
        1: Configuration error
        2: Path-level scan error (missing path, not a directory, unreadable)
    """
    try:
        exit_code = run()
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        exit_code = 130
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
