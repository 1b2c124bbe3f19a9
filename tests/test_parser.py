# tests/test_parser.py

from __future__ import annotations

import pytest

from taskpal.cli import parser
from taskpal.tasks.task_errors import (
    EmptyDescriptionError,
    InvalidFormatError,
    InvalidIndexError,
    InvalidSortCriterionError,
)


def test_split_command_lowercases_word_only() -> None:
    assert parser.split_command("TODO Buy Milk") == ("todo", "Buy Milk")
    assert parser.split_command("  list  ") == ("list", "")
    assert parser.split_command("") == ("", "")


def test_parse_todo_trims() -> None:
    assert parser.parse_todo("    call mom   ") == "call mom"
    with pytest.raises(EmptyDescriptionError):
        parser.parse_todo("   ")


def test_parse_deadline() -> None:
    assert parser.parse_deadline("submit assignment /by 2023-12-01") == ("submit assignment", "2023-12-01")
    assert parser.parse_deadline("project submission /by 2023-12-01 2359") == (
        "project submission",
        "2023-12-01 2359",
    )


def test_parse_deadline_errors() -> None:
    with pytest.raises(EmptyDescriptionError):
        parser.parse_deadline("")
    with pytest.raises(EmptyDescriptionError):
        parser.parse_deadline("/by 2023-12-01")
    with pytest.raises(InvalidFormatError):
        parser.parse_deadline("submit assignment")
    with pytest.raises(InvalidFormatError):
        parser.parse_deadline("a /by 2023-12-01 /by 2023-12-02")


def test_parse_event() -> None:
    assert parser.parse_event("meeting /from 2023-12-01 1400 /to 2023-12-01 1600") == (
        "meeting",
        "2023-12-01 1400",
        "2023-12-01 1600",
    )


def test_parse_event_errors() -> None:
    with pytest.raises(EmptyDescriptionError):
        parser.parse_event("  ")
    with pytest.raises(InvalidFormatError):
        parser.parse_event("meeting")
    with pytest.raises(InvalidFormatError):
        parser.parse_event("meeting /from 2023-12-01 1400")
    with pytest.raises(EmptyDescriptionError):
        parser.parse_event("/from 2023-12-01 1400 /to 2023-12-01 1600")


def test_parse_task_number_converts_to_zero_based() -> None:
    assert parser.parse_task_number("1") == 0
    assert parser.parse_task_number(" 5 ") == 4
    assert parser.parse_task_number("0") == -1


@pytest.mark.parametrize("raw", ["", "abc", "1.5", "one"])
def test_parse_task_number_rejects_non_integers(raw: str) -> None:
    with pytest.raises(InvalidIndexError):
        parser.parse_task_number(raw)


def test_parse_find_and_sort() -> None:
    assert parser.parse_find("  book ") == "book"
    with pytest.raises(EmptyDescriptionError):
        parser.parse_find("")

    assert parser.parse_sort(" deadline ") == "deadline"
    with pytest.raises(InvalidSortCriterionError):
        parser.parse_sort("")
