# src/ben/connectors/embedded_connector.py

"""
Embedded (non-interactive) connector.

Reads requests line by line from any text stream and writes exactly one
response per request, unframed. Suited for driving the task manager from
another program through a pipe.
"""

from __future__ import annotations

import logging
from typing import TextIO

from ..cli.commands import CommandResult
from ..core.session import handle_line, render
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_embedded_loop(state: AppState, stdin: TextIO, stdout: TextIO) -> int:
    """Answer requests until `bye` or end of input. Returns the number of requests handled."""
    handled = 0
    for raw in stdin:
        try:
            result = handle_line(state, raw.rstrip("\r\n"))
        except Exception:
            logger.exception("Command handler crashed.")
            result = CommandResult("Internal error while handling a command.", is_error=True)
        handled += 1
        stdout.write(render(result) + "\n")
        stdout.flush()
        if result.is_exit:
            break
    logger.info("Embedded connector finished after %d requests.", handled)
    return handled
