# src/ben/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from datetime import date

from ..core.ports import TaskPersistence
from ..errors import TaskIndexError
from .dates import display_date
from .task_models import AnyTask, Deadline

logger = logging.getLogger(__name__)


def _numbered(tasks: Sequence[AnyTask], prefix: str = "") -> list[str]:
    return [f"{prefix}{i}.{task}" for i, task in enumerate(tasks, start=1)]


class TaskList:
    """
    Ordered task collection with 1-based numbering (insertion order = display order).

    Every mutating call changes the in-memory list first and then saves through
    the persistence port. A failed save propagates (StorageError) and the
    in-memory change stays applied.
    """

    def __init__(
        self,
        tasks: Sequence[AnyTask] | None = None,
        persistence: TaskPersistence | None = None,
    ) -> None:
        self._tasks: list[AnyTask] = list(tasks or [])
        self._persistence = persistence

    # ---- low-level helpers ----

    def _persist(self) -> None:
        if self._persistence is None:
            return
        self._persistence.save(self._tasks)

    def validate_index(self, index: int) -> None:
        size = len(self._tasks)
        if index < 1 or index > size:
            raise TaskIndexError(
                f"Invalid task number {index}! Please choose a number between 1 and {size}."
            )

    # ---- read API ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[AnyTask]:
        return iter(self._tasks)

    @property
    def size(self) -> int:
        return len(self._tasks)

    def get(self, index: int) -> AnyTask:
        self.validate_index(index)
        return self._tasks[index - 1]

    def render(self) -> str:
        if not self._tasks:
            return "No tasks in your list."
        return "\n".join(_numbered(self._tasks))

    # ---- mutations ----

    def add(self, task: AnyTask) -> None:
        self._tasks.append(task)
        logger.debug("Added task #%d: %s", len(self._tasks), task)
        self._persist()

    def delete(self, index: int) -> AnyTask:
        self.validate_index(index)
        removed = self._tasks.pop(index - 1)
        logger.debug("Deleted task #%d: %s", index, removed)
        self._persist()
        return removed

    def mark(self, index: int) -> AnyTask:
        self.validate_index(index)
        task = self._tasks[index - 1]
        task.mark_complete()
        self._persist()
        return task

    def unmark(self, index: int) -> AnyTask:
        self.validate_index(index)
        task = self._tasks[index - 1]
        task.mark_incomplete()
        self._persist()
        return task

    def reschedule(self, index: int, replacement: AnyTask) -> AnyTask:
        """
        Drop the task at `index` and append `replacement` (it becomes the last task).

        One save covers both steps. Returns the task that was removed.
        """
        self.validate_index(index)
        removed = self._tasks.pop(index - 1)
        self._tasks.append(replacement)
        logger.debug("Rescheduled task #%d -> #%d: %s", index, len(self._tasks), replacement)
        self._persist()
        return removed

    # ---- queries ----

    def find_due_on(self, target: date) -> list[Deadline]:
        return [t for t in self._tasks if isinstance(t, Deadline) and t.due_date == target]

    def find_by_keyword(self, keyword: str) -> list[AnyTask]:
        needle = keyword.lower()
        return [t for t in self._tasks if needle in t.description.lower()]

    def due_on_report(self, target: date) -> str:
        matches = self.find_due_on(target)
        when = display_date(target)
        if not matches:
            return f"No deadlines found for {when}"
        return "\n".join([f"Tasks due on {when}:", *_numbered(matches, prefix=" ")])

    def keyword_report(self, keyword: str) -> str:
        matches = self.find_by_keyword(keyword)
        if not matches:
            return f"No matching tasks found for: {keyword}"
        return "\n".join(["Here are the matching tasks in your list:", *_numbered(matches, prefix=" ")])
