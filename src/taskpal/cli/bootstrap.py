# src/taskpal/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- loads saved tasks and wires the store into the task list.

Load policy: a corrupt or unreadable task file is not fatal. The session
starts with an empty list and AppState.load_warning is set so the front
end can tell the user. Nothing from the corrupt file is kept.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_errors import LoadCorruptedError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def load_task_list(store: TaskRepo, *, autosave: bool = True) -> tuple[TaskList, str | None]:
    """Hydrate a TaskList from the store; fall back to empty on corruption."""
    warning: str | None = None
    tasks: list[Task]
    try:
        tasks = store.load()
    except LoadCorruptedError as e:
        logger.warning("Discarding saved tasks for this session: %s", e)
        tasks = []
        warning = str(e)

    return TaskList(tasks, store=store if autosave else None), warning


def create_initial_state(*, settings=None, store: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and store are injectable to keep tests off the real data dir.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if store is None:
        store = TaskStore(settings.tasks_path)

    autosave = bool(getattr(settings, "autosave", True))
    task_list, warning = load_task_list(store, autosave=autosave)
    logger.info(
        "State ready tasks=%d autosave=%s path=%s",
        task_list.count,
        autosave,
        getattr(store, "path", None),
    )

    return AppState(
        settings=settings,
        task_list=task_list,
        store=store,
        load_warning=warning,
    )
