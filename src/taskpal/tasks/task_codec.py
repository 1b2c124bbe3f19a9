# src/taskpal/tasks/task_codec.py

"""
Line codec: Task <-> one pipe-delimited record.

    T | <0|1> | <description>
    D | <0|1> | <description> | <yyyy-M-d HHmm>
    E | <0|1> | <description> | <yyyy-M-d HHmm> | <yyyy-M-d HHmm>

Pure functions, no I/O.
"""

from __future__ import annotations

from datetime import datetime
from typing import Final

from .task_dates import format_storage, parse_storage
from .task_errors import CorruptRecordError, CorruptTimestampError, UnknownTaskTypeError
from .task_models import FIELD_SEPARATOR, Deadline, Event, Task, TaskKind, ToDo

SEPARATOR: Final[str] = FIELD_SEPARATOR


def encode_task(task: Task) -> str:
    fields = [task.kind.value, "1" if task.is_done else "0", task.description]
    if isinstance(task, Deadline):
        fields.append(format_storage(task.by))
    elif isinstance(task, Event):
        fields.append(format_storage(task.start))
        fields.append(format_storage(task.end))
    return SEPARATOR.join(fields)


def _timestamp(raw: str) -> datetime:
    dt = parse_storage(raw)
    if dt is None:
        raise CorruptTimestampError(raw)
    return dt


def decode_task(line: str) -> Task:
    parts = line.split(SEPARATOR)
    if len(parts) < 3:
        raise CorruptRecordError(f"Corrupted record in save file (expected at least 3 fields): {line!r}")

    tag, done_flag, description = parts[0], parts[1], parts[2]
    try:
        kind = TaskKind(tag)
    except ValueError:
        raise UnknownTaskTypeError(tag) from None

    task: Task
    if kind is TaskKind.TODO:
        task = ToDo(description)
    elif kind is TaskKind.DEADLINE:
        if len(parts) < 4:
            raise CorruptRecordError(f"Corrupted deadline record in save file: {line!r}")
        task = Deadline(description, by=_timestamp(parts[3]))
    else:
        if len(parts) < 5:
            raise CorruptRecordError(f"Corrupted event record in save file: {line!r}")
        task = Event(description, start=_timestamp(parts[3]), end=_timestamp(parts[4]))

    # Anything other than exactly "1" reads as pending.
    task.is_done = done_flag == "1"
    return task
