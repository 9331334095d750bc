# src/ben/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore


@dataclass(slots=True)
class AppState:
    # Settings object (config.Settings in production, a SimpleNamespace in tests).
    settings: Any

    task_store: TaskStore
    tasks: TaskList

    # Set when the task file could not be read at startup; shown once to the user.
    load_error: str | None = None

    @property
    def app_name(self) -> str:
        return str(getattr(self.settings, "app_name", "Ben"))
