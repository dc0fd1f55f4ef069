"""
Command line entry point for the time progress dashboard.

Usage: timebar [--refresh-ms N] [--once] [--moon-phase] [--log-file PATH]
"""

import argparse
import curses
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Mapping, Optional

import requests
from rich.console import Console

from .dashboard import DEFAULT_REFRESH_MS, TimeDashboard
from .moon_phase import MoonPhaseError, get_moon_phase
from .snapshot import print_snapshot

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
logger = logging.getLogger("timebar")


def setup_logging(level="WARNING", log_file: Optional[str] = None):
    """Log to a file when given, otherwise to stderr."""
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[handler],
        force=True,
    )


def load_config(environ: Optional[Mapping[str, str]] = None) -> dict:
    """Load defaults from environment variables."""
    if environ is None:
        environ = os.environ
    return {
        # left as text; --refresh-ms converts it
        "refresh_ms": environ.get("TIMEBAR_REFRESH_MS", str(DEFAULT_REFRESH_MS)),
        "log_level": environ.get("TIMEBAR_LOG_LEVEL", "WARNING").upper(),
        "log_file": environ.get("TIMEBAR_LOG_FILE") or None,
    }


def build_parser(config: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Terminal dashboard showing how much of the minute, hour, day, month and year has passed")
    parser.add_argument("--refresh-ms", type=int, default=config["refresh_ms"],
                        help=f"Redraw interval in milliseconds (default: {config['refresh_ms']})")
    parser.add_argument("--once", action="store_true",
                        help="Print a single snapshot instead of running the live dashboard")
    parser.add_argument("--moon-phase", action="store_true",
                        help="Look up today's moon phase and exit")
    parser.add_argument("--log-file", default=config["log_file"],
                        help="Write log messages to this file")
    parser.add_argument("--log-level", default=config["log_level"],
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help=f"Logging level (default: {config['log_level']})")
    return parser


def show_moon_phase(console: Console) -> int:
    today = datetime.now(timezone.utc).date()
    try:
        phase = get_moon_phase(today)
    except (MoonPhaseError, requests.RequestException) as e:
        logger.error("Could not get moon phase: %s", e)
        console.print(f"[red]Error: {e}[/red]")
        return 1
    console.print(f"🌙 {phase.value}")
    return 0


def main(argv=None) -> int:
    """Entry point for the dashboard application"""
    args = build_parser(load_config()).parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    if args.refresh_ms <= 0:
        logger.error("--refresh-ms must be positive, got %d", args.refresh_ms)
        return 2

    console = Console()
    if args.moon_phase:
        return show_moon_phase(console)
    if args.once:
        print_snapshot(console)
        return 0

    dashboard = TimeDashboard(refresh_ms=args.refresh_ms)
    try:
        curses.wrapper(dashboard.run)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
