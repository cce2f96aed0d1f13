"""
Command line entry point that reports progress for lines read from stdin.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from .config import ReporterSettings, load_settings
from .logging_setup import configure_logging
from .reporting import ProgressReporter


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, got {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("Total must be zero or greater")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tick_eta",
        description="Count lines from stdin as completed units and log progress with an ETA.",
    )
    parser.add_argument(
        "--total",
        type=_non_negative_int,
        required=True,
        help="Number of units (lines) expected.",
    )
    parser.add_argument(
        "--template",
        help="Progress template using {{field}} placeholders.",
    )
    parser.add_argument(
        "--every",
        type=int,
        help="Log a progress line every N units (default: about twenty reports per run).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a JSON settings file.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write progress lines to this file.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def _merge_settings(settings: ReporterSettings, args: argparse.Namespace) -> ReporterSettings:
    return ReporterSettings(
        template=args.template or settings.template,
        every=args.every if args.every and args.every > 0 else settings.every,
        log_level=logging.DEBUG if args.verbose else settings.log_level,
        log_file=args.log_file or settings.log_file,
    )


def run(reporter: ProgressReporter, lines: Iterable[str]) -> int:
    """Tick ``reporter`` once per line and return the number of units seen."""
    last_line = None
    for line in lines:
        last_line = reporter.tick(line.strip() or None)
    if last_line is None:
        reporter.report()
    return reporter.eta.done


def main(argv: Optional[list[str]] = None, stdin: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = _merge_settings(load_settings(args.config), args)
    except (OSError, ValueError) as exc:
        parser.error(f"Could not load settings: {exc}")

    try:
        logger = configure_logging(level=settings.log_level, log_file=settings.log_file)
    except OSError as exc:
        parser.error(f"Could not open log file: {exc}")
    logger.debug("Resolved settings: %s", settings)

    reporter = ProgressReporter.for_total(
        args.total,
        template=settings.template,
        every=settings.every,
        logger=logger,
    )
    seen = run(reporter, stdin if stdin is not None else sys.stdin)
    logger.debug("Processed %s/%s units", seen, args.total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
