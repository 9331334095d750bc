# src/ben/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import StrEnum
from typing import Any, ClassVar, TypeAlias, assert_never

from ..errors import TaskFormatError
from .dates import display_date, display_datetime, parse_date, parse_datetime

# Separates fields in the save file. A description may not contain it, nor
# start or end with a "|" that would join a neighbouring separator.
FIELD_SEPARATOR = " | "


class TaskType(StrEnum):
    """One-letter tag used both on screen and in the save file."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class Task:
    """
    Shared state of every task kind.

    Notes:
    - description is fixed once the task exists; completion is the only mutable field
    - marking is idempotent: mark_complete() twice leaves the task complete
    """

    type: ClassVar[TaskType]

    description: str
    complete: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise TaskFormatError("The description of a task cannot be empty.")
        if FIELD_SEPARATOR in f" {self.description} ":
            raise TaskFormatError("The description of a task cannot contain ' | '.")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "description" and hasattr(self, "description"):
            raise AttributeError("Task description cannot be changed")
        object.__setattr__(self, name, value)

    def mark_complete(self) -> None:
        self.complete = True

    def mark_incomplete(self) -> None:
        self.complete = False

    def __str__(self) -> str:
        return display(self)  # type: ignore[arg-type]


@dataclass(slots=True)
class ToDo(Task):
    type: ClassVar[TaskType] = TaskType.TODO


@dataclass(slots=True)
class Deadline(Task):
    type: ClassVar[TaskType] = TaskType.DEADLINE

    due_date: date

    @classmethod
    def from_text(cls, description: str, due_text: str) -> Deadline:
        return cls(description, parse_date(due_text))


@dataclass(slots=True)
class Event(Task):
    """
    Timed event.

    end is not required to be after start here; only an explicit range given to
    snooze is checked.
    """

    type: ClassVar[TaskType] = TaskType.EVENT

    start: datetime
    end: datetime

    @classmethod
    def from_text(cls, description: str, start_text: str, end_text: str) -> Event:
        return cls(description, parse_datetime(start_text), parse_datetime(end_text))

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


AnyTask: TypeAlias = ToDo | Deadline | Event


def display(task: AnyTask) -> str:
    status = "X" if task.complete else " "
    head = f"[{task.type}][{status}] {task.description}"
    if isinstance(task, ToDo):
        return head
    if isinstance(task, Deadline):
        return f"{head} (by: {display_date(task.due_date)})"
    if isinstance(task, Event):
        return f"{head} (from: {display_datetime(task.start)} to: {display_datetime(task.end)})"
    assert_never(task)
