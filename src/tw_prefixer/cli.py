"""
@meta
name: prefixer_cli
type: script
domain: cli
responsibility:
  - Parse command-line arguments
  - Run one build cycle over the given files and directories
inputs:
  - Command-line arguments
outputs:
  - Rewritten files, or a check report
  - Exit status
tags:
  - cli
lifecycle:
  status: active
"""

"""Command-line entry point: ``tw-prefixer PATH...``."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .batch import DEFAULT_WORKERS, iter_source_files, transform_files
from .common.shared.logging_utils import get_logger, set_log_level
from .config.loader import load_options_file
from .config.settings import PrefixerOptions
from .exceptions import PrefixerError
from .plugin import PrefixerPlugin

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CHANGES_NEEDED = 1
EXIT_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tw-prefixer",
        description="Prefix Tailwind-style utility classes in JS/TS/JSX/TSX sources",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Files or directories to transform",
    )
    parser.add_argument(
        "--prefix",
        type=str,
        default=None,
        help="Prefix to apply (default: read from the Tailwind config)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a tw-prefixer.yaml options file",
    )
    parser.add_argument(
        "--tailwind-config",
        type=Path,
        default=None,
        help="Path to the Tailwind config file to read the prefix from",
    )
    parser.add_argument(
        "--attribute",
        dest="attributes",
        action="append",
        default=None,
        help="JSX attribute to transform (repeatable; default: className, class, tw)",
    )
    parser.add_argument(
        "--include",
        type=str,
        default=None,
        help="Regex of file paths to include",
    )
    parser.add_argument(
        "--exclude",
        type=str,
        default=None,
        help="Regex of file paths to exclude",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--check",
        action="store_true",
        help="Do not write files; exit 1 if any file would change",
    )
    output.add_argument(
        "--stdout",
        action="store_true",
        help="Print rewritten sources instead of writing them",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help=f"Worker threads (default: {DEFAULT_WORKERS})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> PrefixerOptions:
    """Merge the options file (if any) with command-line overrides."""
    options = load_options_file(args.config) if args.config else PrefixerOptions()
    if args.prefix is not None:
        options.prefix_override = args.prefix
    if args.tailwind_config is not None:
        options.tailwind_config = args.tailwind_config
    if args.attributes:
        options.attributes = tuple(args.attributes)
    if args.include is not None:
        options.include = args.include
    if args.exclude is not None:
        options.exclude = args.exclude
    return options


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        0 on success, 1 when ``--check`` finds files to change, 2 when the
        configuration is invalid or any file failed.
    """
    args = build_parser().parse_args(argv)
    set_log_level(args.log_level)

    try:
        plugin = PrefixerPlugin(options_from_args(args))
        plugin.build_start()
    except PrefixerError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_FAILURE

    files = iter_source_files(args.paths, plugin.file_filter)
    if not files:
        logger.warning("No matching source files found")
        return EXIT_OK

    write = not (args.check or args.stdout)
    outcomes = transform_files(plugin, files, workers=args.workers, write=write)

    changed: List[Path] = []
    for outcome in outcomes:
        if not outcome.ok:
            print(f"error: {outcome.path}: {outcome.error}", file=sys.stderr)
        elif outcome.changed:
            changed.append(outcome.path)
            if args.stdout:
                sys.stdout.write(outcome.code)
            elif args.check:
                print(f"would rewrite {outcome.path}")
            else:
                print(f"rewrote {outcome.path}")

    if any(not outcome.ok for outcome in outcomes):
        return EXIT_FAILURE
    if args.check and changed:
        return EXIT_CHANGES_NEEDED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
