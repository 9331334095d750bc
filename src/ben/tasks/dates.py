# src/ben/tasks/dates.py

from __future__ import annotations

import re
from datetime import date, datetime, time

from ..errors import TaskFormatError

DATE_PATTERN = "%Y-%m-%d"
DATETIME_PATTERN = "%Y-%m-%d %H%M"
TIME_PATTERN = "%H%M"

DISPLAY_DATE_PATTERN = "%b %d %Y"
DISPLAY_DATETIME_PATTERN = "%b %d %Y %H%M"

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_DATETIME_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{4}")
_TIME_RE = re.compile(r"\d{4}")

DATE_HINT = "Invalid date format! Please use yyyy-mm-dd format (e.g., 2019-12-25)"
DATETIME_HINT = "Invalid date-time format! Please use yyyy-mm-dd HHmm format (e.g., 2019-12-25 1400)"
TIME_HINT = "Invalid time format! Please use HHmm format (e.g., 1400)"


def parse_date(text: str, *, error: str = DATE_HINT) -> date:
    """Parse a strict `yyyy-MM-dd` date (impossible dates such as Feb 30 are rejected)."""
    raw = text.strip()
    if not _DATE_RE.fullmatch(raw):
        raise TaskFormatError(error)
    try:
        return datetime.strptime(raw, DATE_PATTERN).date()
    except ValueError as exc:
        raise TaskFormatError(error) from exc


def parse_datetime(text: str, *, error: str = DATETIME_HINT) -> datetime:
    """Parse a strict `yyyy-MM-dd HHmm` date-time."""
    raw = " ".join(text.split())
    if not _DATETIME_RE.fullmatch(raw):
        raise TaskFormatError(error)
    try:
        return datetime.strptime(raw, DATETIME_PATTERN)
    except ValueError as exc:
        raise TaskFormatError(error) from exc


def parse_time(text: str, *, error: str = TIME_HINT) -> time:
    raw = text.strip()
    if not _TIME_RE.fullmatch(raw):
        raise TaskFormatError(error)
    try:
        return datetime.strptime(raw, TIME_PATTERN).time()
    except ValueError as exc:
        raise TaskFormatError(error) from exc


def format_date(value: date) -> str:
    return value.strftime(DATE_PATTERN)


def format_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_PATTERN)


def display_date(value: date) -> str:
    return value.strftime(DISPLAY_DATE_PATTERN)


def display_datetime(value: datetime) -> str:
    return value.strftime(DISPLAY_DATETIME_PATTERN)
