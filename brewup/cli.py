"""
Command-line entry point.

Usage:
    brewup                    # Upgrade every category, then everything else
    brewup -P                 # Only highest_priority and priority
    brewup -c large_size      # Only the given categories
    brewup -D -v my.yaml      # Dry run with a custom config file
"""

from __future__ import annotations

import argparse
from typing import Sequence

from . import __version__
from .common import vlog
from .config import (
    CATEGORY_NAMES,
    CONFIG_PATHS_ENV,
    DEFAULT_CONFIG_FILENAME,
    ConfigError,
    load_config,
)
from .logging_config import get_logger, setup_logging
from .package_managers import probe_outdated
from .runner import RunOptions
from .selection import select_categories
from .upgrade import execute_upgrade


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="brewup",
        description="Upgrade outdated Homebrew packages by priority category",
        epilog=(
            f"Categories: {', '.join(CATEGORY_NAMES)}. "
            f"Extra config directories can be listed in ${CONFIG_PATHS_ENV} (colon-separated)."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-c", "--categories",
        metavar="CATEGORIES",
        help="Specify categories to upgrade (comma-separated)",
    )
    parser.add_argument(
        "-P", "--priority",
        action="store_true",
        help="Upgrade highest_priority and priority packages",
    )
    parser.add_argument(
        "-D", "--dry-run",
        action="store_true",
        help="Dry run mode: show commands without executing",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Also write a detailed log to PATH",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_FILENAME,
        help=f"Config file name (default: {DEFAULT_CONFIG_FILENAME})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)
    options = RunOptions(dry_run=args.dry_run, verbose=args.verbose)

    selection = select_categories(args.categories, args.priority)
    vlog(f"Selected categories: {sorted(selection)}", options.verbose)

    try:
        categories = load_config(args.config, verbose=options.verbose)
    except ConfigError as e:
        get_logger().error(e.message)
        return 0

    probe = probe_outdated(options)
    execute_upgrade(selection, categories, probe.packages, options)
    return 0
