# src/ben/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs one connector:
- console: interactive session with banners (default),
- embedded: one plain response per stdin line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ..config import MODES, get_settings
from ..connectors.console_connector import run_console_loop
from ..connectors.embedded_connector import run_embedded_loop
from ..logging_setup import setup_logging
from .bootstrap import create_initial_state

logger = logging.getLogger(__name__)


def _build_parser(default_mode: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ben", description="Line-oriented task manager.")
    parser.add_argument(
        "mode",
        nargs="?",
        type=str.lower,
        choices=MODES,
        default=default_mode,
        help=f"session type (default: {default_mode})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    settings = get_settings()
    args = _build_parser(settings.mode).parse_args(argv)

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_file_enabled,
    )

    logger.info("Starting %s (%s mode)...", settings.app_name, args.mode)
    state = create_initial_state(settings=settings)

    if args.mode == "embedded":
        run_embedded_loop(state, sys.stdin, sys.stdout)
    else:
        run_console_loop(state)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
