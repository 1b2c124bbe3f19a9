# src/taskpal/core/persona.py

"""User-facing wording of the assistant. Kept in one place so front ends stay thin."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from ..tasks.task_models import Task, TaskKind

GREETING: Final[str] = "Hey! {name} here, thrilled to see you!\nLet's dive RIGHT in, what can I do for you? :)"
FAREWELL: Final[str] = "Aww, you're leaving already? It's been such a\npleasure, can't wait till next time! :)"
LOAD_WARNING: Final[str] = "Oops! Had trouble loading your saved tasks. Starting with a fresh task list!"
EMPTY_LIST: Final[str] = "Your task list is as empty as my coffee cup. Time to add some tasks!"

_ADDED_LEAD = {
    TaskKind.TODO: "Boom! A ToDo task just joined the party:",
    TaskKind.DEADLINE: "All set! A Deadline task just joined the party:",
    TaskKind.EVENT: "Tada! An Event task just joined the party:",
}


def welcome_text(app_name: str, load_warning: str | None = None) -> str:
    text = GREETING.format(name=app_name)
    if load_warning:
        text = f"{LOAD_WARNING}\n\n{text}"
    return text


def _numbered(tasks: Sequence[Task]) -> str:
    return "\n".join(f"{i}. {t}" for i, t in enumerate(tasks, start=1))


def task_count_line(count: int) -> str:
    return f"Your task arsenal now stands at {count} strong!"


def added_text(task: Task, count: int) -> str:
    return f"{_ADDED_LEAD[task.kind]}\n{task}\n\n{task_count_line(count)}"


def deleted_text(task: Task, count: int) -> str:
    return f"Poof! Task vanished from existence:\n{task}\n\n{task_count_line(count)}"


def marked_text(task: Task) -> str:
    return f"Boom! That task is history - marked as done and dusted:\n{task}"


def unmarked_text(task: Task) -> str:
    return f"Aha! This task is no longer done - it's waiting for your magic touch again:\n{task}"


def list_text(tasks: Sequence[Task]) -> str:
    if not tasks:
        return EMPTY_LIST
    return f"Here are your tasks:\n\n{_numbered(tasks)}"


def find_text(found: Sequence[Task], keyword: str) -> str:
    if not found:
        return f"No tasks found with keyword '{keyword}'. Time to add some tasks!"
    return f"Here are the matching tasks in your list:\n\n{_numbered(found)}"


def sorted_text(criterion: str, tasks: Sequence[Task]) -> str:
    return f"Shuffled! Tasks are now sorted by {criterion}.\n\n{list_text(tasks)}"
