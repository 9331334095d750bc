# src/ben/core/ports.py

"""
Ports (interfaces) used by the core.

The task list and the session depend on Protocols instead of concrete
implementations, so tests can swap in in-memory doubles and connectors can
render results however they like.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import AnyTask


class TaskPersistence(Protocol):
    """Whatever the task list writes itself to after each change (TaskStore in production)."""

    def save(self, tasks: Sequence[AnyTask]) -> None: ...


class DisplaySink(Protocol):
    """
    Connector-side port: where session output goes.

    The sink gets discrete, already formatted events; it decides how to frame
    them (dividers, timestamps, colours, ...).
    """

    def show_welcome(self, app_name: str) -> None: ...
    def show_result(self, text: str) -> None: ...
    def show_error(self, text: str) -> None: ...
    def show_goodbye(self) -> None: ...
    def close(self) -> None: ...
