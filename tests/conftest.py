# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpal.cli.bootstrap import create_initial_state
from taskpal.core.state import AppState
from taskpal.tasks.task_list import TaskList
from taskpal.tasks.task_store import TaskStore

from .fakes import FakeTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and the real data dir.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskpal",
        log_level="WARNING",
        autosave=True,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        log_dir=data_dir,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def fake_store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def task_list(fake_store: FakeTaskStore) -> TaskList:
    return TaskList(store=fake_store)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired through the real bootstrap.

    NOTE: the real file-backed TaskStore is used here because the
    chat -> task list -> file path is part of what we want to test.
    """
    return create_initial_state(settings=settings)
