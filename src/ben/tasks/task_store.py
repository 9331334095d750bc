# src/ben/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import StorageError
from .codec import decode, encode
from .task_models import AnyTask

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Flat-file task store.

    The file holds one record per line (see codec.py). It is read once at
    startup and rewritten in full on every save:
    - a missing file is an empty task list, not an error
    - corrupted lines are skipped, the rest still loads
    - saves go through a temporary sibling file + os.replace
    """

    def __init__(self, path: str | Path = "data/ben.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_dir(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create data directory {self._path.parent}: {exc}") from exc

    def load(self) -> list[AnyTask]:
        self._ensure_dir()
        if not self._path.exists():
            logger.info("No task file at %s, starting empty.", self._path)
            return []

        try:
            lines = self._path.read_text("utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Error loading tasks from file: {exc}") from exc

        tasks: list[AnyTask] = []
        for line in lines:
            task = decode(line)
            if task is not None:
                tasks.append(task)

        logger.info("Loaded %d tasks from %s (%d lines)", len(tasks), self._path, len(lines))
        return tasks

    def save(self, tasks: Iterable[AnyTask]) -> None:
        self._ensure_dir()
        body = "".join(encode(task) + "\n" for task in tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(body, "utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(
                f"Error saving tasks to file: {exc}. "
                "The change is kept for this session but was not saved to disk."
            ) from exc
        logger.debug("Saved %d bytes to %s", len(body), self._path)
