# src/taskpal/cli/parser.py

"""
Free-text argument parsing for chat commands.

Every function takes the text after the command word and returns the
structured arguments for the task list, or raises a TaskError whose
message is shown to the user as-is.
"""

from __future__ import annotations

from ..tasks.task_errors import (
    EmptyDescriptionError,
    InvalidFormatError,
    InvalidIndexError,
    InvalidSortCriterionError,
)
from ..tasks.task_list import sort_options_help

DEADLINE_USAGE = "deadline <DESCRIPTION> /by <DATE/TIME>"
EVENT_USAGE = "event <DESCRIPTION> /from <START> /to <END>"


def split_command(line: str) -> tuple[str, str]:
    """Split "word rest of line" into (lowercased word, rest)."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    word = parts[0].lower()
    rest = parts[1] if len(parts) > 1 else ""
    return word, rest


def parse_todo(args: str) -> str:
    description = args.strip()
    if not description:
        raise EmptyDescriptionError("todo")
    return description


def parse_deadline(args: str) -> tuple[str, str]:
    content = args.strip()
    if not content:
        raise EmptyDescriptionError("deadline")

    parts = f" {content}".split(" /by ")
    if len(parts) != 2:
        raise InvalidFormatError(DEADLINE_USAGE)
    description, by_text = parts[0].strip(), parts[1].strip()
    if not description:
        raise EmptyDescriptionError("deadline")
    if not by_text:
        raise EmptyDescriptionError("deadline date")
    return description, by_text


def parse_event(args: str) -> tuple[str, str, str]:
    content = args.strip()
    if not content:
        raise EmptyDescriptionError("event")

    head = f" {content}".split(" /from ")
    if len(head) != 2:
        raise InvalidFormatError(EVENT_USAGE)
    times = head[1].split(" /to ")
    if len(times) != 2:
        raise InvalidFormatError(EVENT_USAGE)

    description, start, end = head[0].strip(), times[0].strip(), times[1].strip()
    if not description:
        raise EmptyDescriptionError("event")
    if not start:
        raise EmptyDescriptionError("event start time")
    if not end:
        raise EmptyDescriptionError("event end time")
    return description, start, end


def parse_task_number(args: str) -> int:
    """1-based task number -> 0-based index. Range is checked by the task list."""
    try:
        return int(args.strip()) - 1
    except ValueError:
        raise InvalidIndexError() from None


def parse_find(args: str) -> str:
    keyword = args.strip()
    if not keyword:
        raise EmptyDescriptionError("find keyword")
    return keyword


def parse_sort(args: str) -> str:
    keyword = args.strip()
    if not keyword:
        raise InvalidSortCriterionError("", sort_options_help())
    return keyword
