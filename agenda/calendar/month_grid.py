"""Month grid arithmetic.

A month is displayed as whole weeks running Sunday to Saturday, so the grid
also carries the trailing days of the previous month and the leading days of
the next one.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterable, List, TypeVar, Union

DateLike = Union[date, datetime]
T = TypeVar("T")

DAYS_PER_WEEK = 7


def as_date(value: DateLike) -> date:
    """Drop the time part of ``value``, if any."""
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_month(value: DateLike) -> date:
    return as_date(value).replace(day=1)


def end_of_month(value: DateLike) -> date:
    day = as_date(value)
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=last)


def start_of_week(value: DateLike) -> date:
    """Return the Sunday on or before ``value``, or ``date.min`` if that Sunday
    does not exist."""
    day = as_date(value)
    # date.weekday(): Monday == 0 ... Sunday == 6
    offset = (day.weekday() + 1) % DAYS_PER_WEEK
    if (day - date.min).days < offset:
        return date.min
    return day - timedelta(days=offset)


def end_of_week(value: DateLike) -> date:
    """Return the Saturday on or after ``value``, or ``date.max`` if that
    Saturday does not exist."""
    day = as_date(value)
    offset = (5 - day.weekday()) % DAYS_PER_WEEK
    if (date.max - day).days < offset:
        return date.max
    return day + timedelta(days=offset)


def each_day(start: date, end: date) -> List[date]:
    if end < start:
        return []
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def grid_bounds(reference: DateLike) -> tuple[date, date]:
    return start_of_week(start_of_month(reference)), end_of_week(end_of_month(reference))


def month_grid(reference: DateLike) -> List[date]:
    """Return every date shown for the month containing ``reference``.

    Only the year and month of ``reference`` matter. The result starts on a
    Sunday, ends on a Saturday and its length is a multiple of seven.
    """
    start, end = grid_bounds(reference)
    return each_day(start, end)


def chunk_weeks(days: Iterable[T]) -> List[List[T]]:
    """Split a flat grid into rows of seven."""
    rows: List[List[T]] = []
    for item in days:
        if not rows or len(rows[-1]) == DAYS_PER_WEEK:
            rows.append([])
        rows[-1].append(item)
    return rows


def in_month(day: date, reference: DateLike) -> bool:
    ref = as_date(reference)
    return day.year == ref.year and day.month == ref.month
