# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime

import pytest

from taskpal.tasks.task_dates import format_display, format_storage, has_time_part, parse_storage
from taskpal.tasks.task_errors import (
    EmptyDescriptionError,
    InvalidDateFormatError,
    InvalidFormatError,
    SeparatorInDescriptionError,
    TimeRequiredError,
)
from taskpal.tasks.task_models import Deadline, Event, TaskKind, ToDo, new_deadline, new_event, new_todo


def test_todo_starts_pending_and_renders_empty_status_brackets() -> None:
    todo = new_todo("read book")
    assert todo.kind is TaskKind.TODO
    assert todo.is_done is False
    assert todo.status_icon == "[]"
    assert str(todo) == "[T][]read book"


def test_mark_and_unmark_are_idempotent() -> None:
    todo = new_todo("buy milk")

    todo.unmark_done()
    assert todo.is_done is False

    todo.mark_done()
    todo.mark_done()
    assert todo.is_done is True
    assert todo.render() == "[T][X]buy milk"

    todo.unmark_done()
    todo.unmark_done()
    assert todo.is_done is False


@pytest.mark.parametrize("blank", ["", " ", "\t  "])
def test_blank_descriptions_are_rejected(blank: str) -> None:
    with pytest.raises(EmptyDescriptionError):
        new_todo(blank)
    with pytest.raises(EmptyDescriptionError):
        new_deadline(blank, "2025-12-01")
    with pytest.raises(EmptyDescriptionError):
        new_event(blank, "2025-12-10 1400", "2025-12-10 1600")


def test_description_is_stored_as_given() -> None:
    todo = new_todo(" x ")
    assert todo.description == " x "
    assert str(todo) == "[T][] x "


@pytest.mark.parametrize("description", ["cats | dogs", "pay a | b", "ends with |", " | "])
def test_descriptions_holding_the_field_separator_are_rejected(description: str) -> None:
    with pytest.raises(SeparatorInDescriptionError) as exc:
        new_todo(description)
    assert exc.value.field == "todo"

    with pytest.raises(SeparatorInDescriptionError) as exc:
        new_deadline(description, "2025-12-01")
    assert exc.value.field == "deadline"

    with pytest.raises(InvalidFormatError):
        new_event(description, "2025-12-10 1400", "2025-12-10 1600")


def test_pipes_without_surrounding_spaces_are_fine() -> None:
    assert new_todo("a|b").description == "a|b"
    assert new_deadline("| lead", "2025-12-01").description == "| lead"
    assert new_event("|", "2025-12-10 1400", "2025-12-10 1600").description == "|"


def test_blank_schedule_fields_name_the_field() -> None:
    with pytest.raises(EmptyDescriptionError) as exc:
        new_deadline("submit", "  ")
    assert exc.value.field == "deadline date"

    with pytest.raises(EmptyDescriptionError) as exc:
        new_event("mtg", "", "2025-12-10 1600")
    assert exc.value.field == "event start time"

    with pytest.raises(EmptyDescriptionError) as exc:
        new_event("mtg", "2025-12-10 1400", " ")
    assert exc.value.field == "event end time"


def test_deadline_date_only_defaults_to_end_of_day() -> None:
    deadline = new_deadline("submit", "2025-12-01")
    assert isinstance(deadline, Deadline)
    assert deadline.by == datetime(2025, 12, 1, 23, 59)
    assert str(deadline) == "[D][]submit (by: Dec 01 2025 11:59pm)"


def test_deadline_with_time_and_unpadded_fields() -> None:
    deadline = new_deadline("pay rent", "2025-1-5 0930")
    assert deadline.by == datetime(2025, 1, 5, 9, 30)
    assert str(deadline) == "[D][]pay rent (by: Jan 05 2025 9:30am)"


def test_event_renders_both_times() -> None:
    event = new_event("mtg", "2025-12-10 1400", "2025-12-10 1600")
    assert isinstance(event, Event)
    assert str(event) == "[E][]mtg (from: Dec 10 2025 2:00pm to: Dec 10 2025 4:00pm)"


def test_event_requires_time_of_day() -> None:
    with pytest.raises(TimeRequiredError):
        new_event("mtg", "2025-12-10", "2025-12-10 1600")
    with pytest.raises(TimeRequiredError):
        new_event("mtg", "2025-12-10 1400", "2025-12-10")


def test_event_end_before_start_is_allowed() -> None:
    event = new_event("backwards", "2025-12-10 1600", "2025-12-10 1400")
    assert event.start > event.end


@pytest.mark.parametrize(
    "raw",
    ["tomorrow", "2025/12/01", "01-12-2025", "2025-13-01", "2025-02-30", "2025-12-01 2460", "2025-12-01 930"],
)
def test_bad_deadline_dates_are_rejected(raw: str) -> None:
    with pytest.raises(InvalidDateFormatError):
        new_deadline("submit", raw)


def test_bad_event_dates_are_format_errors() -> None:
    with pytest.raises(InvalidDateFormatError):
        new_event("mtg", "next week 1400", "2025-12-10 1600")


def test_time_detection_rule() -> None:
    assert has_time_part("2025-12-01 1800")
    assert has_time_part("  2025-12-01 1800  ")
    assert not has_time_part("2025-12-01")
    assert not has_time_part("2025-12-01 18000")


def test_display_format_noon_and_midnight() -> None:
    assert format_display(datetime(2025, 3, 9, 0, 5)) == "Mar 09 2025 12:05am"
    assert format_display(datetime(2025, 3, 9, 12, 0)) == "Mar 09 2025 12:00pm"


def test_storage_format_is_unpadded_and_round_trips() -> None:
    dt = datetime(2025, 1, 5, 7, 3)
    assert format_storage(dt) == "2025-1-5 0703"
    assert parse_storage("2025-1-5 0703") == dt
    assert parse_storage("2025-01-05") is None


def test_variants_compare_by_value() -> None:
    assert ToDo("a") == ToDo("a")
    assert ToDo("a") != ToDo("a", is_done=True)


@pytest.mark.parametrize(
    "raw",
    ["2025-12-01 １８００", "２０２５-12-01", "2025-12-٠١"],
)
def test_only_ascii_digits_are_accepted_in_dates(raw: str) -> None:
    assert not has_time_part(raw)
    with pytest.raises(InvalidDateFormatError):
        new_deadline("submit", raw)
    with pytest.raises(InvalidDateFormatError):
        new_event("mtg", raw, "2025-12-10 1600")
    assert parse_storage(raw) is None
