# src/ben/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from ..core.ports import DisplaySink
from ..core.session import ERROR_PREFIX, handle_line
from ..core.state import AppState

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60


class ConsoleDisplay:
    """DisplaySink that frames every response between divider lines."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout

    def _frame(self, text: str) -> None:
        print(DIVIDER, file=self._out)
        for line in text.splitlines() or [""]:
            print(f" {line}", file=self._out)
        print(DIVIDER, file=self._out, flush=True)

    def show_welcome(self, app_name: str) -> None:
        self._frame(f"Hello! I'm {app_name}\nWhat can I do for you?")

    def show_result(self, text: str) -> None:
        self._frame(text)

    def show_error(self, text: str) -> None:
        self._frame(ERROR_PREFIX + text)

    def show_goodbye(self) -> None:
        self._frame("Bye. Hope to see you again soon!")

    def close(self) -> None:
        self._out.flush()


def run_console_loop(
    state: AppState,
    *,
    display: DisplaySink | None = None,
    read_line: Callable[[], str] = input,
) -> None:
    """
    Interactive session: welcome, one framed response per line, goodbye on `bye`.

    End of input stops the loop without the goodbye banner; only `bye` ends a
    session properly.
    """
    display = display if display is not None else ConsoleDisplay()
    logger.info("Console connector started (tasks=%d).", state.tasks.size)

    display.show_welcome(state.app_name)
    if state.load_error:
        display.show_error(state.load_error)

    try:
        while True:
            try:
                line = read_line()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                break

            try:
                result = handle_line(state, line)
            except Exception:
                logger.exception("Command handler crashed.")
                display.show_error("Internal error while handling a command.")
                continue

            if result.is_exit:
                display.show_goodbye()
                break
            if result.is_error:
                display.show_error(result.message)
            else:
                display.show_result(result.message)
    finally:
        display.close()

    logger.info("Console connector finished.")
