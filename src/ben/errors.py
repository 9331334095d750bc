# src/ben/errors.py

"""
Domain errors.

Every user-facing failure is a BenError (or a subclass). Callers never need to
tell "bad input" apart from "the disk failed": the session layer catches
BenError, shows the message and keeps going.
"""

from __future__ import annotations


class BenError(Exception):
    """Recoverable failure with a human-readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TaskFormatError(BenError):
    """A description, date or time could not be turned into a task."""


class TaskIndexError(BenError):
    """A task number outside [1, size]."""


class StorageError(BenError):
    """Reading or writing the task file failed."""
