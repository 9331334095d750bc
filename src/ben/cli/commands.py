# src/ben/cli/commands.py

"""
Command grammar.

A raw line becomes one typed command:

    line -> trim -> (word, rest) -> registry[word.lower()](rest) -> Command

Each command carries already validated arguments and knows how to run itself
against a TaskList, returning a CommandResult for the connector to render.
Parsing a line never touches the task list.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import TypeAlias

from ..errors import BenError, TaskFormatError
from ..tasks.dates import parse_date
from ..tasks.snooze import snooze
from ..tasks.task_list import TaskList
from ..tasks.task_models import AnyTask, Deadline, Event, ToDo

logger = logging.getLogger(__name__)

GOODBYE = "Bye. Hope to see you again soon!"

_WORD_RE = re.compile(r"\s+")
_NUMBER_RE = re.compile(r"-?[0-9]+")


@dataclass(frozen=True, slots=True)
class CommandResult:
    """What a command produced; connectors decide how to show it."""

    message: str
    is_exit: bool = False
    task: AnyTask | None = None
    index: int | None = None
    is_error: bool = False


def _added(tasks: TaskList, task: AnyTask) -> CommandResult:
    tasks.add(task)
    return CommandResult(
        f"Got it. I've added this task:\n   {task}\nNow you have {tasks.size} tasks in the list.",
        task=task,
        index=tasks.size,
    )


@dataclass(frozen=True, slots=True)
class ExitCommand:
    def execute(self, tasks: TaskList) -> CommandResult:
        return CommandResult(GOODBYE, is_exit=True)


@dataclass(frozen=True, slots=True)
class ListCommand:
    def execute(self, tasks: TaskList) -> CommandResult:
        return CommandResult(tasks.render())


@dataclass(frozen=True, slots=True)
class MarkCommand:
    index: int
    done: bool

    def execute(self, tasks: TaskList) -> CommandResult:
        if self.done:
            task = tasks.mark(self.index)
            text = f"Nice! I've marked this task as done:\n   {task}"
        else:
            task = tasks.unmark(self.index)
            text = f"OK, I've marked this task as not done yet:\n   {task}"
        return CommandResult(text, task=task, index=self.index)


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    index: int

    def execute(self, tasks: TaskList) -> CommandResult:
        task = tasks.delete(self.index)
        return CommandResult(
            f"Noted. I've removed this task:\n   {task}\nNow you have {tasks.size} tasks in the list.",
            task=task,
            index=self.index,
        )


@dataclass(frozen=True, slots=True)
class AddToDoCommand:
    description: str

    def execute(self, tasks: TaskList) -> CommandResult:
        return _added(tasks, ToDo(self.description))


@dataclass(frozen=True, slots=True)
class AddDeadlineCommand:
    description: str
    due_text: str

    def execute(self, tasks: TaskList) -> CommandResult:
        return _added(tasks, Deadline.from_text(self.description, self.due_text))


@dataclass(frozen=True, slots=True)
class AddEventCommand:
    description: str
    start_text: str
    end_text: str

    def execute(self, tasks: TaskList) -> CommandResult:
        return _added(tasks, Event.from_text(self.description, self.start_text, self.end_text))


@dataclass(frozen=True, slots=True)
class FindDueCommand:
    target: date

    def execute(self, tasks: TaskList) -> CommandResult:
        return CommandResult(tasks.due_on_report(self.target))


@dataclass(frozen=True, slots=True)
class FindKeywordCommand:
    keyword: str

    def execute(self, tasks: TaskList) -> CommandResult:
        return CommandResult(tasks.keyword_report(self.keyword))


@dataclass(frozen=True, slots=True)
class SnoozeCommand:
    index: int
    expression: str

    def execute(self, tasks: TaskList) -> CommandResult:
        original = tasks.get(self.index)
        replacement = snooze(original, self.expression)
        tasks.reschedule(self.index, replacement)
        return CommandResult(
            f"Got it. I've snoozed this task:\n   {original}\nIt is now:\n   {replacement}",
            task=replacement,
            index=tasks.size,
        )


Command: TypeAlias = (
    ExitCommand
    | ListCommand
    | MarkCommand
    | DeleteCommand
    | AddToDoCommand
    | AddDeadlineCommand
    | AddEventCommand
    | FindDueCommand
    | FindKeywordCommand
    | SnoozeCommand
)
CommandParser = Callable[[str], Command]


# ---- argument parsers ----


def parse_task_number(text: str, command_word: str) -> int:
    raw = text.strip()
    if not raw:
        raise BenError(f"You must specify a task to {command_word}! Format: {command_word} <task_number>")
    if not _NUMBER_RE.fullmatch(raw):
        raise BenError("Task number must be a valid number!")
    try:
        number = int(raw)
    except ValueError as exc:
        raise BenError("Task number must be a valid number!") from exc
    if number <= 0:
        raise BenError("Task number must be positive!")
    return number


def _parse_todo(rest: str) -> Command:
    description = rest.strip()
    if not description:
        raise TaskFormatError("The description of a todo cannot be empty.")
    return AddToDoCommand(description)


def _parse_deadline(rest: str) -> Command:
    if not rest.strip():
        raise TaskFormatError("The description of a deadline cannot be empty.")
    description, sep, due_text = rest.partition(" /by ")
    if not sep:
        raise TaskFormatError("Please use format: deadline <description> /by <yyyy-mm-dd>")
    if not description.strip():
        raise TaskFormatError("The description of a deadline cannot be empty.")
    if not due_text.strip():
        raise TaskFormatError("The deadline date cannot be empty.")
    return AddDeadlineCommand(description.strip(), due_text.strip())


def _parse_event(rest: str) -> Command:
    usage = "Please use format: event <description> /from <yyyy-mm-dd HHmm> /to <yyyy-mm-dd HHmm>"
    if not rest.strip():
        raise TaskFormatError("The description of an event cannot be empty.")
    description, sep, times = rest.partition(" /from ")
    if not sep:
        raise TaskFormatError(usage)
    start_text, sep, end_text = times.partition(" /to ")
    if not sep:
        raise TaskFormatError(usage)
    if not description.strip():
        raise TaskFormatError("The description of an event cannot be empty.")
    if not start_text.strip():
        raise TaskFormatError("The event start time cannot be empty.")
    if not end_text.strip():
        raise TaskFormatError("The event end time cannot be empty.")
    return AddEventCommand(description.strip(), start_text.strip(), end_text.strip())


def _parse_due(rest: str) -> Command:
    if not rest.strip():
        raise BenError("Please specify a date! Format: due <yyyy-mm-dd>")
    return FindDueCommand(parse_date(rest))


def _parse_find(rest: str) -> Command:
    keyword = rest.strip()
    if not keyword:
        raise BenError("Please specify a keyword to search for! Format: find <keyword>")
    return FindKeywordCommand(keyword)


def _parse_snooze(rest: str) -> Command:
    usage = "Format: snooze <task_number> <new_date> or snooze <task_number> +<days>"
    parts = rest.strip().split(maxsplit=1)
    if not parts:
        raise BenError(f"Please specify which task to snooze! {usage}")
    if len(parts) < 2:
        raise BenError(f"Please specify both task number and new date! {usage}")
    return SnoozeCommand(parse_task_number(parts[0], "snooze"), parts[1])


class CommandRegistry:
    """Keyword -> parser table; keywords match case-insensitively."""

    def __init__(self) -> None:
        self._parsers: dict[str, CommandParser] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        parser: CommandParser,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._parsers[key] = parser
        self._help[key] = help_text
        for alias in aliases:
            self._parsers[alias.lower()] = parser

    def parse(self, line: str) -> Command:
        """
        Turn a raw line into a Command.
        Raises BenError for empty input, unknown keywords and bad arguments.
        """
        text = line.strip()
        if not text:
            raise BenError("Please enter a command!")

        parts = _WORD_RE.split(text, maxsplit=1)
        word = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        parser = self._parsers.get(word)
        if parser is None:
            raise BenError(f"Unrecognized command: {parts[0]}\n{self.build_help()}")
        command = parser(rest)
        logger.debug("Parsed %r -> %s", word, type(command).__name__)
        return command

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()

registry.register("bye", lambda rest: ExitCommand(), help_text="End the session.")
registry.register("list", lambda rest: ListCommand(), help_text="Show all tasks.")
registry.register(
    "mark",
    lambda rest: MarkCommand(parse_task_number(rest, "mark"), True),
    help_text="Mark a task as done: mark <task_number>.",
)
registry.register(
    "unmark",
    lambda rest: MarkCommand(parse_task_number(rest, "unmark"), False),
    help_text="Mark a task as not done: unmark <task_number>.",
)
registry.register(
    "delete",
    lambda rest: DeleteCommand(parse_task_number(rest, "delete")),
    help_text="Remove a task: delete <task_number>.",
)
registry.register("todo", _parse_todo, help_text="Add a todo: todo <description>.")
registry.register(
    "deadline", _parse_deadline, help_text="Add a deadline: deadline <description> /by <yyyy-mm-dd>."
)
registry.register(
    "event",
    _parse_event,
    help_text="Add an event: event <description> /from <yyyy-mm-dd HHmm> /to <yyyy-mm-dd HHmm>.",
)
registry.register("due", _parse_due, help_text="Deadlines due on a day: due <yyyy-mm-dd>.")
registry.register("find", _parse_find, help_text="Search descriptions: find <keyword>.")
registry.register(
    "snooze", _parse_snooze, help_text="Reschedule a deadline or event: snooze <task_number> <when>."
)


def parse_command(line: str) -> Command:
    return registry.parse(line)
