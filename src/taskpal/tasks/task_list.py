# src/taskpal/tasks/task_list.py

"""
Task list engine.

Owns the ordered collection of tasks and every state transition on it.
After each mutation the full collection is handed to the attached store
(if any). Saving is best-effort: a failed save never undoes the mutation
and never raises; the outcome is reported in the returned MutationResult.

Positions are 0-based here; the chat layer converts from 1-based numbers.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from ..core.ports import TaskRepo
from .task_errors import (
    IndexOutOfRangeError,
    InvalidIndexError,
    InvalidSortCriterionError,
    StorageError,
)
from .task_models import Task, due_at, new_deadline, new_event, new_todo

logger = logging.getLogger(__name__)


class SortCriterion(StrEnum):
    CREATION = "creation"
    TYPE = "type"
    STATUS = "status"
    DEADLINE = "deadline"
    ALPHA = "alpha"

    @property
    def help_text(self) -> str:
        return _SORT_HELP[self]

    @classmethod
    def from_keyword(cls, keyword: str) -> SortCriterion:
        key = (keyword or "").strip().lower()
        for criterion in cls:
            if criterion.value == key:
                return criterion
        raise InvalidSortCriterionError(keyword, sort_options_help())


_SORT_HELP = {
    SortCriterion.CREATION: "Sort by creation order",
    SortCriterion.TYPE: "Sort by task type (Todo, Deadline, Event)",
    SortCriterion.STATUS: "Sort by completion status (pending first)",
    SortCriterion.DEADLINE: "Sort by deadline date (chronologically)",
    SortCriterion.ALPHA: "Sort alphabetically",
}


def sort_options_help() -> str:
    lines = ["Available sort options:"]
    for criterion in SortCriterion:
        lines.append(f"- {criterion.value} - {criterion.help_text}")
    lines.append("")
    lines.append("Usage: sort [option] (e.g., 'sort deadline', 'sort status')")
    return "\n".join(lines)


class SaveOutcome(StrEnum):
    SAVED = "saved"
    FAILED = "failed"
    SKIPPED = "skipped"  # no store attached


@dataclass(slots=True, frozen=True)
class MutationResult:
    """
    What a mutating call did.

    The mutation itself always stands once a result is returned;
    `save` tells whether it also reached the store.
    """

    task: Task | None
    save: SaveOutcome
    save_error: StorageError | None = None

    @property
    def persisted(self) -> bool:
        return self.save is SaveOutcome.SAVED


@dataclass(slots=True)
class _Entry:
    seq: int
    task: Task


class TaskList:
    def __init__(self, tasks: Iterable[Task] | None = None, *, store: TaskRepo | None = None) -> None:
        self._seq = itertools.count()
        self._entries: list[_Entry] = [_Entry(next(self._seq), t) for t in (tasks or [])]
        self._store = store

    @property
    def store(self) -> TaskRepo | None:
        return self._store

    # ---- persistence ----

    def _autosave(self) -> tuple[SaveOutcome, StorageError | None]:
        if self._store is None:
            return SaveOutcome.SKIPPED, None
        try:
            self._store.save(self.tasks)
        except StorageError as e:
            logger.warning("Auto-save failed; keeping in-memory change. %s", e)
            return SaveOutcome.FAILED, e
        return SaveOutcome.SAVED, None

    def _mutated(self, task: Task | None) -> MutationResult:
        outcome, err = self._autosave()
        return MutationResult(task=task, save=outcome, save_error=err)

    def _check_index(self, index: int, error: type[InvalidIndexError] = InvalidIndexError) -> None:
        if not isinstance(index, int) or index < 0 or index >= len(self._entries):
            raise error(index, len(self._entries))

    # ---- adding ----

    def _append(self, task: Task) -> MutationResult:
        self._entries.append(_Entry(next(self._seq), task))
        logger.debug("Task added kind=%s count=%d", task.kind.value, len(self._entries))
        return self._mutated(task)

    def add_todo(self, description: str) -> MutationResult:
        return self._append(new_todo(description))

    def add_deadline(self, description: str, by_text: str) -> MutationResult:
        return self._append(new_deadline(description, by_text))

    def add_event(self, description: str, from_text: str, to_text: str) -> MutationResult:
        return self._append(new_event(description, from_text, to_text))

    # ---- mutating by position ----

    def delete_task(self, index: int) -> MutationResult:
        self._check_index(index)
        removed = self._entries.pop(index).task
        logger.debug("Task deleted index=%d count=%d", index, len(self._entries))
        return self._mutated(removed)

    def mark_task(self, index: int) -> MutationResult:
        self._check_index(index)
        task = self._entries[index].task
        task.mark_done()
        return self._mutated(task)

    def unmark_task(self, index: int) -> MutationResult:
        self._check_index(index)
        task = self._entries[index].task
        task.unmark_done()
        return self._mutated(task)

    # ---- queries ----

    def find_tasks(self, keyword: str) -> list[Task]:
        """Case-insensitive substring match on descriptions, in list order."""
        needle = keyword.lower()
        return [e.task for e in self._entries if needle in e.task.description.lower()]

    def get_task(self, index: int) -> Task:
        self._check_index(index, IndexOutOfRangeError)
        return self._entries[index].task

    @property
    def count(self) -> int:
        return len(self._entries)

    def get_task_count(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(e.task for e in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    # ---- sorting ----

    def sort_tasks(self, criterion: SortCriterion | str) -> MutationResult:
        """Reorder in place. Ties always fall back to creation order."""
        if not isinstance(criterion, SortCriterion):
            criterion = SortCriterion.from_keyword(criterion)

        key = _SORT_KEYS[criterion]
        self._entries.sort(key=lambda e: (*key(e.task), e.seq))
        logger.debug("Tasks sorted by %s", criterion.value)
        return self._mutated(None)


def _deadline_key(task: Task) -> tuple[int, datetime]:
    due = due_at(task)
    if due is None:
        return (1, datetime.min)
    return (0, due)


_SORT_KEYS: dict[SortCriterion, Callable[[Task], tuple]] = {
    SortCriterion.CREATION: lambda t: (),
    SortCriterion.TYPE: lambda t: (t.kind.rank,),
    SortCriterion.STATUS: lambda t: (t.is_done,),
    SortCriterion.DEADLINE: _deadline_key,
    SortCriterion.ALPHA: lambda t: (t.render().lower(),),
}
