# src/taskpal/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task list depends on a Protocol instead of the concrete file store.
This keeps storage swappable and lets tests inject a recording fake.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-collection persistence: load everything, save everything."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Sequence[Task]) -> None: ...
