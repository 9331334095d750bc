# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ben.errors import StorageError
from ben.tasks.codec import encode
from ben.tasks.task_models import AnyTask


@dataclass(slots=True)
class InMemoryPersistence:
    """
    Persistence double: keeps every save as the list of records it would have written.
    """

    saves: list[list[str]] = field(default_factory=list)

    def save(self, tasks: Sequence[AnyTask]) -> None:
        self.saves.append([encode(t) for t in tasks])

    @property
    def last(self) -> list[str]:
        return self.saves[-1] if self.saves else []


class FailingPersistence:
    """Persistence double whose disk is always full."""

    def __init__(self) -> None:
        self.calls = 0

    def save(self, tasks: Sequence[AnyTask]) -> None:
        self.calls += 1
        raise StorageError("Error saving tasks to file: disk full")


@dataclass(slots=True)
class RecordingDisplay:
    """DisplaySink that remembers every event as (kind, text)."""

    events: list[tuple[str, str]] = field(default_factory=list)
    closed: bool = False

    def show_welcome(self, app_name: str) -> None:
        self.events.append(("welcome", app_name))

    def show_result(self, text: str) -> None:
        self.events.append(("result", text))

    def show_error(self, text: str) -> None:
        self.events.append(("error", text))

    def show_goodbye(self) -> None:
        self.events.append(("goodbye", ""))

    def close(self) -> None:
        self.closed = True

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.events]


def scripted_input(*lines: str):
    """read_line replacement: returns the given lines, then raises EOFError."""
    pending = list(lines)

    def read_line() -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read_line
