# src/taskpal/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings live on the state so handlers never read global config.
    settings: object

    task_list: TaskList
    store: TaskRepo | None = None

    # Set by bootstrap when the saved file could not be read.
    load_warning: str | None = None
