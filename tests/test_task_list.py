# tests/test_task_list.py

from __future__ import annotations

from datetime import date

import pytest

from ben.errors import StorageError, TaskIndexError
from ben.tasks.task_list import TaskList
from ben.tasks.task_models import Deadline, Event, ToDo

from .fakes import FailingPersistence, InMemoryPersistence


def _fill(tasks: TaskList, n: int) -> list[ToDo]:
    added = [ToDo(f"task {i}") for i in range(1, n + 1)]
    for t in added:
        tasks.add(t)
    return added


@pytest.mark.parametrize("n", [0, 1, 5])
def test_size_and_insertion_order(tasks: TaskList, n: int) -> None:
    added = _fill(tasks, n)
    assert tasks.size == n == len(tasks)
    for i in range(1, n + 1):
        assert tasks.get(i) is added[i - 1]


@pytest.mark.parametrize("n", [0, 3])
def test_out_of_range_indices_always_fail(tasks: TaskList, n: int) -> None:
    _fill(tasks, n)
    for bad in (0, n + 1, -1):
        with pytest.raises(TaskIndexError):
            tasks.get(bad)
        with pytest.raises(TaskIndexError):
            tasks.delete(bad)
        with pytest.raises(TaskIndexError):
            tasks.mark(bad)


def test_index_error_message_uses_current_size(tasks: TaskList) -> None:
    _fill(tasks, 3)
    with pytest.raises(TaskIndexError) as exc:
        tasks.get(4)
    assert "between 1 and 3" in exc.value.message

    tasks.delete(1)
    with pytest.raises(TaskIndexError) as exc:
        tasks.get(3)
    assert "between 1 and 2" in exc.value.message


def test_index_error_on_empty_list_states_the_range(tasks: TaskList) -> None:
    with pytest.raises(TaskIndexError) as exc:
        tasks.get(1)
    assert exc.value.message == "Invalid task number 1! Please choose a number between 1 and 0."


def test_delete_compacts_indices(tasks: TaskList) -> None:
    added = _fill(tasks, 4)
    removed = tasks.delete(2)
    assert removed is added[1]
    assert tasks.get(2) is added[2]
    assert tasks.size == 3


def test_mark_then_unmark(tasks: TaskList) -> None:
    _fill(tasks, 1)
    tasks.mark(1)
    tasks.mark(1)
    assert tasks.get(1).complete
    tasks.unmark(1)
    assert not tasks.get(1).complete


def test_every_mutation_persists(tasks: TaskList, persistence: InMemoryPersistence) -> None:
    tasks.add(ToDo("read book"))
    tasks.add(Deadline("return book", date(2019, 12, 25)))
    tasks.mark(2)
    tasks.unmark(1)
    tasks.delete(1)

    assert len(persistence.saves) == 5
    assert persistence.last == ["D | 1 | return book | 2019-12-25"]


def test_reads_do_not_persist(tasks: TaskList, persistence: InMemoryPersistence) -> None:
    _fill(tasks, 2)
    before = len(persistence.saves)
    tasks.get(1)
    tasks.render()
    tasks.keyword_report("task")
    tasks.due_on_report(date(2019, 12, 25))
    assert len(persistence.saves) == before


def test_failed_save_keeps_in_memory_change() -> None:
    failing = FailingPersistence()
    tasks = TaskList([ToDo("read book")], persistence=failing)

    with pytest.raises(StorageError):
        tasks.add(ToDo("buy milk"))
    assert tasks.size == 2

    with pytest.raises(StorageError):
        tasks.mark(1)
    assert tasks.get(1).complete
    assert failing.calls == 2


def test_reschedule_moves_replacement_to_end(tasks: TaskList, persistence: InMemoryPersistence) -> None:
    added = _fill(tasks, 3)
    saves_before = len(persistence.saves)
    replacement = ToDo("task 1 again")

    removed = tasks.reschedule(1, replacement)

    assert removed is added[0]
    assert tasks.get(3) is replacement
    assert tasks.get(1) is added[1]
    assert len(persistence.saves) == saves_before + 1


def test_render(tasks: TaskList) -> None:
    assert tasks.render() == "No tasks in your list."
    tasks.add(ToDo("read book"))
    tasks.add(ToDo("buy milk"))
    tasks.mark(2)
    assert tasks.render() == "1.[T][ ] read book\n2.[T][X] buy milk"


def test_find_by_keyword_is_case_insensitive_on_description(tasks: TaskList) -> None:
    tasks.add(ToDo("read book"))
    tasks.add(ToDo("buy milk"))
    tasks.add(Deadline("Return BOOK", date(2019, 12, 25)))

    matches = tasks.find_by_keyword("book")
    assert [t.description for t in matches] == ["read book", "Return BOOK"]
    assert tasks.find_by_keyword("2019") == []


def test_keyword_report(tasks: TaskList) -> None:
    tasks.add(ToDo("read book"))
    tasks.add(ToDo("buy milk"))

    report = tasks.keyword_report("book")
    assert report == "Here are the matching tasks in your list:\n 1.[T][ ] read book"
    assert tasks.keyword_report("car") == "No matching tasks found for: car"


def test_due_on_matches_deadlines_exactly(tasks: TaskList) -> None:
    tasks.add(Deadline("return book", date(2019, 12, 25)))
    tasks.add(Deadline("pay rent", date(2019, 12, 26)))
    tasks.add(Event.from_text("party", "2019-12-25 1900", "2019-12-25 2300"))
    tasks.add(ToDo("wrap gifts"))

    matches = tasks.find_due_on(date(2019, 12, 25))
    assert [t.description for t in matches] == ["return book"]

    report = tasks.due_on_report(date(2019, 12, 25))
    assert report.startswith("Tasks due on Dec 25 2019:")
    assert " 1.[D][ ] return book" in report
    assert tasks.due_on_report(date(2020, 1, 1)) == "No deadlines found for Jan 01 2020"


def test_without_persistence_nothing_is_saved() -> None:
    tasks = TaskList()
    tasks.add(ToDo("read book"))
    assert tasks.size == 1
