# src/ben/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- loads the task file and wires the TaskStore into the TaskList.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..errors import BenError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    A task file that cannot be read does not stop startup: the session begins
    with an empty list and state.load_error says why.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    try:
        _ensure_local_dirs(settings)
    except OSError:
        logger.exception("Failed to create data directories.")

    store = TaskStore(settings.tasks_path)
    load_error: str | None = None
    try:
        loaded = store.load()
    except BenError as e:
        logger.error("Problem loading tasks from %s: %s", store.path, e.message)
        load_error = f"Problem loading tasks: {e.message}"
        loaded = []

    return AppState(
        settings=settings,
        task_store=store,
        tasks=TaskList(loaded, persistence=store),
        load_error=load_error,
    )
