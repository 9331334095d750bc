# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from ben.cli.bootstrap import create_initial_state
from ben.core.state import AppState
from ben.tasks.task_list import TaskList
from ben.tasks.task_store import TaskStore

from .fakes import InMemoryPersistence


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Ben",
        log_level="DEBUG",
        log_file_enabled=False,
        mode="console",
        data_dir=data_dir,
        tasks_path=data_dir / "ben.txt",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def persistence() -> InMemoryPersistence:
    return InMemoryPersistence()


@pytest.fixture()
def tasks(persistence: InMemoryPersistence) -> TaskList:
    """Empty TaskList that records saves in memory instead of writing files."""
    return TaskList(persistence=persistence)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState built the same way the CLI builds it.

    NOTE: the real TaskStore is kept here (pointing into tmp_path) because the
    file it writes is part of what we want to test.
    """
    return create_initial_state(settings=settings)
