# tests/test_task_models.py

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from ben.errors import BenError, TaskFormatError
from ben.tasks.task_models import Deadline, Event, TaskType, ToDo


def test_todo_display_and_type() -> None:
    task = ToDo("read book")
    assert task.type is TaskType.TODO
    assert str(task) == "[T][ ] read book"
    assert not task.complete


def test_marking_is_idempotent() -> None:
    task = ToDo("read book")
    task.mark_complete()
    task.mark_complete()
    assert task.complete
    assert str(task) == "[T][X] read book"

    task.mark_incomplete()
    task.mark_incomplete()
    assert not task.complete


def test_description_is_read_only() -> None:
    task = ToDo("read book")
    with pytest.raises(AttributeError):
        task.description = "something else"
    assert task.description == "read book"


def test_empty_description_rejected() -> None:
    with pytest.raises(TaskFormatError):
        ToDo("   ")


@pytest.mark.parametrize("description", ["read x | y", "pay |", "| pay"])
def test_description_cannot_hold_the_field_separator(description: str) -> None:
    with pytest.raises(TaskFormatError) as exc:
        ToDo(description)
    assert "' | '" in exc.value.message


def test_description_may_hold_a_bare_bar() -> None:
    assert ToDo("a|b").description == "a|b"
    assert ToDo("x || y").description == "x || y"


def test_deadline_from_text_and_display() -> None:
    task = Deadline.from_text("return book", "2019-12-25")
    assert task.due_date == date(2019, 12, 25)
    assert task.type is TaskType.DEADLINE
    assert str(task) == "[D][ ] return book (by: Dec 25 2019)"


@pytest.mark.parametrize("bad", ["2019-02-30", "2019-1-5", "25/12/2019", "tomorrow", ""])
def test_deadline_rejects_bad_dates(bad: str) -> None:
    with pytest.raises(TaskFormatError) as exc:
        Deadline.from_text("return book", bad)
    assert "yyyy-mm-dd" in exc.value.message


def test_event_from_text_and_display() -> None:
    task = Event.from_text("trip", "2019-12-25 1400", "2019-12-25 1600")
    assert task.start == datetime(2019, 12, 25, 14, 0)
    assert task.duration == timedelta(minutes=120)
    assert str(task) == "[E][ ] trip (from: Dec 25 2019 1400 to: Dec 25 2019 1600)"


def test_event_rejects_bad_date_time() -> None:
    with pytest.raises(BenError):
        Event.from_text("trip", "2019-12-25 2500", "2019-12-25 1600")
    with pytest.raises(BenError):
        Event.from_text("trip", "2019-12-25", "2019-12-25 1600")


def test_event_construction_allows_end_before_start() -> None:
    # Only the explicit-range snooze forms check ordering.
    task = Event.from_text("odd", "2019-12-25 1600", "2019-12-25 1400")
    assert task.duration == timedelta(minutes=-120)


def test_completion_keyword_on_construction() -> None:
    task = Deadline("return book", date(2019, 12, 25), complete=True)
    assert str(task).startswith("[D][X]")
