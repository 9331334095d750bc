# src/ben/core/session.py

"""
Transport-agnostic command execution.

Connectors hand in one raw line and get one CommandResult back:
- parse + execute happen inside a single BenError boundary,
- a domain error becomes an error result, never an exception,
- the caller decides how to render the result (console frame, plain line, ...).
"""

from __future__ import annotations

import logging

from ..cli.commands import CommandResult, parse_command
from ..errors import BenError, StorageError
from .state import AppState

logger = logging.getLogger(__name__)

ERROR_PREFIX = "OOPS!!! "


def handle_line(state: AppState, line: str) -> CommandResult:
    try:
        command = parse_command(line)
        return command.execute(state.tasks)
    except StorageError as e:
        logger.error("Task change applied in memory but not saved: %s", e.message)
        return CommandResult(e.message, is_error=True)
    except BenError as e:
        logger.debug("Command rejected %r: %s", line, e.message)
        return CommandResult(e.message, is_error=True)


def render(result: CommandResult) -> str:
    if result.is_error:
        return ERROR_PREFIX + result.message
    return result.message


def process_command(state: AppState, line: str) -> str:
    """One request, one response string (for callers without a read loop)."""
    return render(handle_line(state, line))
