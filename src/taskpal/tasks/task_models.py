# src/taskpal/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar, Final

from .task_dates import format_display, parse_deadline_input, parse_event_input
from .task_errors import EmptyDescriptionError, SeparatorInDescriptionError

# Field separator of the save file; descriptions may not contain it.
FIELD_SEPARATOR: Final[str] = " | "


class TaskKind(StrEnum):
    """
    Closed set of task variants.

    The value doubles as the type letter in the save file and in the
    rendered "[T]" / "[D]" / "[E]" tag.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def icon(self) -> str:
        return f"[{self.value}]"

    @property
    def rank(self) -> int:
        """Position used by the type sort: ToDo < Deadline < Event."""
        return _KIND_RANK[self]


_KIND_RANK = {TaskKind.TODO: 0, TaskKind.DEADLINE: 1, TaskKind.EVENT: 2}


@dataclass(slots=True)
class Task:
    description: str
    is_done: bool = field(default=False, kw_only=True)

    kind: ClassVar[TaskKind]

    def mark_done(self) -> None:
        self.is_done = True

    def unmark_done(self) -> None:
        self.is_done = False

    @property
    def status_icon(self) -> str:
        return "[X]" if self.is_done else "[]"

    def render(self) -> str:
        return render_task(self)

    def __str__(self) -> str:
        return render_task(self)


@dataclass(slots=True)
class ToDo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(Task):
    by: datetime

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE


@dataclass(slots=True)
class Event(Task):
    # No ordering is enforced between start and end.
    start: datetime
    end: datetime

    kind: ClassVar[TaskKind] = TaskKind.EVENT


def render_task(task: Task) -> str:
    """Canonical one-line rendering, e.g. "[D][]submit (by: Dec 01 2025 11:59pm)"."""
    head = f"{task.kind.icon}{task.status_icon}{task.description}"
    if isinstance(task, ToDo):
        return head
    if isinstance(task, Deadline):
        return f"{head} (by: {format_display(task.by)})"
    if isinstance(task, Event):
        return f"{head} (from: {format_display(task.start)} to: {format_display(task.end)})"
    raise TypeError(f"Unsupported task type: {type(task).__name__}")


def due_at(task: Task) -> datetime | None:
    """The timestamp the deadline sort orders by (only Deadline tasks have one)."""
    if isinstance(task, Deadline):
        return task.by
    return None


def _require(value: str, field_name: str) -> None:
    if not value or not value.strip():
        raise EmptyDescriptionError(field_name)


def _require_storable(description: str, field_name: str) -> None:
    # A trailing " |" fuses with the separator written after it.
    if FIELD_SEPARATOR in f"{description} ":
        raise SeparatorInDescriptionError(field_name, FIELD_SEPARATOR)


def new_todo(description: str) -> ToDo:
    _require(description, "todo")
    _require_storable(description, "todo")
    return ToDo(description)


def new_deadline(description: str, by_text: str) -> Deadline:
    _require(description, "deadline")
    _require_storable(description, "deadline")
    _require(by_text, "deadline date")
    return Deadline(description, by=parse_deadline_input(by_text))


def new_event(description: str, from_text: str, to_text: str) -> Event:
    _require(description, "event")
    _require_storable(description, "event")
    _require(from_text, "event start time")
    _require(to_text, "event end time")
    return Event(
        description,
        start=parse_event_input(from_text),
        end=parse_event_input(to_text),
    )
