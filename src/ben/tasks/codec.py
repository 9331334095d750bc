# src/ben/tasks/codec.py

"""
One-line text encoding of a task.

Record layout (fields joined by " | "):

    T | <done> | <description>
    D | <done> | <description> | <yyyy-MM-dd>
    E | <done> | <description> | <yyyy-MM-dd HHmm> | <yyyy-MM-dd HHmm>

<done> is "1" or "0". Event times are always written as `yyyy-MM-dd HHmm`;
ISO date-times (`2019-12-25T14:00`) from older files are still read.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import assert_never

from ..errors import BenError, TaskFormatError
from .dates import DATETIME_HINT, format_date, format_datetime, parse_date, parse_datetime
from .task_models import FIELD_SEPARATOR, AnyTask, Deadline, Event, TaskType, ToDo

logger = logging.getLogger(__name__)

DELIMITER = FIELD_SEPARATOR


def encode(task: AnyTask) -> str:
    fields = [str(task.type), "1" if task.complete else "0", task.description]
    if isinstance(task, ToDo):
        pass
    elif isinstance(task, Deadline):
        fields.append(format_date(task.due_date))
    elif isinstance(task, Event):
        fields.extend((format_datetime(task.start), format_datetime(task.end)))
    else:
        assert_never(task)
    return DELIMITER.join(fields)


def _decode_datetime(text: str) -> datetime:
    raw = text.strip()
    if "T" not in raw:
        return parse_datetime(raw)
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise TaskFormatError(DATETIME_HINT) from exc


def decode(line: str) -> AnyTask | None:
    """
    Turn one record back into a task.

    Returns None for anything that cannot be loaded:
    - blank lines and records with fewer than 3 fields are dropped quietly
    - unknown tags, missing or unparseable date fields are dropped with a warning
    """
    line = line.strip()
    if not line:
        return None

    parts = line.split(DELIMITER)
    if len(parts) < 3:
        logger.debug("Dropping short record (%d fields): %r", len(parts), line)
        return None

    tag, done, description = parts[0], parts[1], parts[2]

    task: AnyTask
    try:
        if tag == TaskType.TODO:
            task = ToDo(description)
        elif tag == TaskType.DEADLINE:
            if len(parts) < 4:
                raise BenError("deadline record has no due date")
            task = Deadline(description, parse_date(parts[3]))
        elif tag == TaskType.EVENT:
            if len(parts) < 5:
                raise BenError("event record needs a start and an end")
            task = Event(description, _decode_datetime(parts[3]), _decode_datetime(parts[4]))
        else:
            raise BenError(f"unknown task type {tag!r}")
    except BenError as exc:
        logger.warning("Skipping corrupted task entry %r: %s", line, exc.message)
        return None

    if done == "1":
        task.mark_complete()
    return task
