# src/ben/tasks/snooze.py

"""
Rescheduling ("snooze") of deadlines and events.

snooze() never touches the task it is given: it builds a replacement with the
same description and completion flag, which the caller swaps into the list.

Expressions understood (tokens after the task number):

    Deadline
      +<days>                          move the due date forward
      <yyyy-MM-dd>                     new due date

    Event (duration = end - start of the current event)
      +<days>                          move start and end together
      <yyyy-MM-dd>                     new start day, same start time, same duration
      <yyyy-MM-dd> <HHmm>              new start, same duration
      /start <yyyy-MM-dd> [<HHmm>]     same as the two forms above
      /duration <minutes>              same start, new length
      /from <yyyy-MM-dd> <HHmm>        new start, same duration
      <yyyy-MM-dd> <HHmm> <HHmm>       explicit range on one day
      /from <date> <HHmm> /to [<date>] <HHmm>
                                       explicit range

The event forms are told apart by token count first and modifier second,
tried in the order of EVENT_SHAPES; the first match wins. Only the explicit
range forms require end > start.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import assert_never

from ..errors import TaskFormatError
from .dates import parse_date, parse_datetime, parse_time
from .task_models import AnyTask, Deadline, Event, ToDo

logger = logging.getLogger(__name__)

DEADLINE_DATE_HINT = (
    "Invalid date format! Use yyyy-MM-dd or +<days> for relative snoozing "
    "(e.g., +3 for 3 days later)."
)
EVENT_DATE_HINT = (
    "Invalid date format! Use yyyy-MM-dd or yyyy-MM-dd HHmm for events, "
    "or +<days> for relative snoozing."
)
EVENT_USAGE = (
    "I couldn't understand that snooze. For events use: +<days>, <yyyy-MM-dd> [HHmm], "
    "/start <yyyy-MM-dd> [HHmm], /duration <minutes>, <yyyy-MM-dd> <HHmm> <HHmm> "
    "or /from <yyyy-MM-dd HHmm> /to <yyyy-MM-dd HHmm>."
)
RANGE_USAGE = "Please use format: snooze <task_number> /from <yyyy-MM-dd HHmm> /to <yyyy-MM-dd HHmm>"
OUT_OF_RANGE = "That snooze would move the task outside the supported dates (years 1 to 9999)!"

EventTimes = tuple[datetime, datetime]

_DAYS_RE = re.compile(r"[0-9]+")
_MINUTES_RE = re.compile(r"-?[0-9]+")


def _whole_number(digits: str) -> int:
    try:
        return int(digits)
    except ValueError as exc:  # past the interpreter's int conversion limit
        raise TaskFormatError(OUT_OF_RANGE) from exc


def parse_relative_days(token: str) -> int:
    """`+3` -> 3. Anything else that looks relative is rejected with a specific message."""
    if not token.startswith("+"):
        raise TaskFormatError("Relative days must start with '+' (e.g., +3 for 3 days later).")
    if not _DAYS_RE.fullmatch(token[1:]):
        raise TaskFormatError(
            "Invalid number format for relative days! Use +<number> (e.g., +3 for 3 days later)."
        )
    days = _whole_number(token[1:])
    if days <= 0:
        raise TaskFormatError("Number of days to snooze must be positive!")
    return days


def _span(**amount: int) -> timedelta:
    try:
        return timedelta(**amount)
    except OverflowError as exc:
        raise TaskFormatError(OUT_OF_RANGE) from exc


def _later(value, delta: timedelta):
    """value + delta for a date or datetime, with overflow reported as a format error."""
    try:
        return value + delta
    except OverflowError as exc:
        raise TaskFormatError(OUT_OF_RANGE) from exc


def _is_relative(token: str) -> bool:
    return token[:1] in ("+", "-")


def _modifier(tokens: list[str]) -> str:
    return tokens[0].lower() if tokens else ""


# ---- event shape handlers ----


def _event_shift(event: Event, tokens: list[str]) -> EventTimes:
    token = tokens[0]
    if _is_relative(token):
        delta = _span(days=parse_relative_days(token))
        return _later(event.start, delta), _later(event.end, delta)
    new_day = parse_date(token, error=EVENT_DATE_HINT)
    start = datetime.combine(new_day, event.start.time())
    return start, _later(start, event.duration)


def _event_new_start(event: Event, value: list[str]) -> EventTimes:
    if len(value) == 1:
        new_day = parse_date(value[0], error=EVENT_DATE_HINT)
        start = datetime.combine(new_day, event.start.time())
    else:
        start = parse_datetime(" ".join(value), error=EVENT_DATE_HINT)
    return start, _later(start, event.duration)


def _event_duration(event: Event, tokens: list[str]) -> EventTimes:
    if not _MINUTES_RE.fullmatch(tokens[1]):
        raise TaskFormatError("Duration must be a whole number of minutes (e.g., /duration 90).")
    minutes = _whole_number(tokens[1])
    if minutes <= 0:
        raise TaskFormatError("Duration must be a positive number of minutes!")
    return event.start, _later(event.start, _span(minutes=minutes))


def _checked_range(start: datetime, end: datetime) -> EventTimes:
    if end <= start:
        raise TaskFormatError("The new end time must be after the new start time!")
    return start, end


def _event_day_range(event: Event, tokens: list[str]) -> EventTimes:
    day: date = parse_date(tokens[0], error=EVENT_DATE_HINT)
    start = datetime.combine(day, parse_time(tokens[1]))
    end = datetime.combine(day, parse_time(tokens[2]))
    return _checked_range(start, end)


def _event_from_to(event: Event, tokens: list[str]) -> EventTimes:
    rest = tokens[1:]
    lowered = [t.lower() for t in rest]
    if "/to" not in lowered:
        raise TaskFormatError(RANGE_USAGE)
    cut = lowered.index("/to")
    start_part, end_part = rest[:cut], rest[cut + 1 :]
    if not start_part or not end_part:
        raise TaskFormatError(RANGE_USAGE)

    start = parse_datetime(" ".join(start_part), error=EVENT_DATE_HINT)
    if len(end_part) == 1:
        end = datetime.combine(start.date(), parse_time(end_part[0]))
    else:
        end = parse_datetime(" ".join(end_part), error=EVENT_DATE_HINT)
    return _checked_range(start, end)


@dataclass(frozen=True, slots=True)
class SnoozeShape:
    name: str
    matches: Callable[[list[str]], bool]
    apply: Callable[[Event, list[str]], EventTimes]


EVENT_SHAPES: tuple[SnoozeShape, ...] = (
    SnoozeShape("shift", lambda t: len(t) == 1, _event_shift),
    SnoozeShape(
        "start-date",
        lambda t: len(t) == 2 and _modifier(t) == "/start",
        lambda e, t: _event_new_start(e, t[1:]),
    ),
    SnoozeShape("duration", lambda t: len(t) == 2 and _modifier(t) == "/duration", _event_duration),
    SnoozeShape("date-time", lambda t: len(t) == 2, _event_new_start),
    SnoozeShape(
        "start-date-time",
        lambda t: len(t) == 3 and _modifier(t) == "/start",
        lambda e, t: _event_new_start(e, t[1:]),
    ),
    SnoozeShape(
        "from-date-time",
        lambda t: len(t) == 3 and _modifier(t) == "/from",
        lambda e, t: _event_new_start(e, t[1:]),
    ),
    SnoozeShape("day-range", lambda t: len(t) == 3, _event_day_range),
    SnoozeShape("from-to", lambda t: len(t) >= 4 and _modifier(t) == "/from", _event_from_to),
)


def match_event_shape(tokens: list[str]) -> SnoozeShape | None:
    for shape in EVENT_SHAPES:
        if shape.matches(tokens):
            return shape
    return None


def _snooze_deadline(deadline: Deadline, tokens: list[str]) -> Deadline:
    if len(tokens) != 1:
        raise TaskFormatError(
            "Deadlines only take a date: snooze <task_number> <yyyy-MM-dd> "
            "or snooze <task_number> +<days>"
        )
    token = tokens[0]
    if _is_relative(token):
        due = _later(deadline.due_date, _span(days=parse_relative_days(token)))
    else:
        due = parse_date(token, error=DEADLINE_DATE_HINT)
    return Deadline(deadline.description, due, complete=deadline.complete)


def _snooze_event(event: Event, tokens: list[str]) -> Event:
    shape = match_event_shape(tokens)
    if shape is None:
        raise TaskFormatError(EVENT_USAGE)
    logger.debug("Event snooze shape=%s tokens=%s", shape.name, tokens)
    start, end = shape.apply(event, tokens)
    return Event(event.description, start, end, complete=event.complete)


def snooze(task: AnyTask, expression: str) -> AnyTask:
    """Return a rescheduled copy of `task`; raise TaskFormatError when the expression is unusable."""
    tokens = expression.split()
    if not tokens:
        raise TaskFormatError(
            "Please specify a new date! Format: snooze <task_number> <new_date> "
            "or snooze <task_number> +<days>"
        )

    if isinstance(task, ToDo):
        raise TaskFormatError(
            "Only deadlines and events can be snoozed! ToDo tasks don't have specific dates."
        )
    if isinstance(task, Deadline):
        return _snooze_deadline(task, tokens)
    if isinstance(task, Event):
        return _snooze_event(task, tokens)
    assert_never(task)
