"""Same-day matching between grid days and appointments."""

from __future__ import annotations

from collections import Counter
from datetime import date, datetime, tzinfo
from typing import Dict, Iterable, List, Optional

from agenda.calendar.month_grid import DateLike, as_date
from agenda.schemas.appointment import Appointment


def calendar_day(moment: datetime, tz: Optional[tzinfo] = None) -> date:
    """Truncate ``moment`` to its calendar day.

    Aware timestamps keep their own wall-clock date unless ``tz`` is given,
    in which case they are converted to ``tz`` first.
    """
    if tz is not None and moment.tzinfo is not None:
        moment = moment.astimezone(tz)
    return moment.date()


def is_same_day(left: DateLike, right: DateLike) -> bool:
    return as_date(left) == as_date(right)


def appointments_for_day(
    day: DateLike,
    appointments: Iterable[Appointment],
    *,
    tz: Optional[tzinfo] = None,
) -> List[Appointment]:
    target = as_date(day)
    return [
        appointment
        for appointment in appointments
        if calendar_day(appointment.start_date, tz) == target
    ]


def count_by_day(
    appointments: Iterable[Appointment],
    *,
    tz: Optional[tzinfo] = None,
) -> Dict[date, int]:
    """Count appointments per start day in a single pass."""
    return dict(Counter(calendar_day(appointment.start_date, tz) for appointment in appointments))
