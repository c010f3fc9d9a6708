"""Month view projection combining the grid with appointment counts."""

from __future__ import annotations

from datetime import date, tzinfo
from typing import Dict, Iterable, Optional

from agenda.calendar.locale import WEEKDAY_NAMES, badge_label, day_label, month_title
from agenda.calendar.matching import appointments_for_day, count_by_day, is_same_day
from agenda.calendar.month_grid import DateLike, as_date, chunk_weeks, grid_bounds, in_month, month_grid
from agenda.schemas.appointment import Appointment
from agenda.schemas.calendar import CalendarDay, DayAppointments, Density, MonthView, ViewSizes

DENSITY_SIZES: Dict[str, ViewSizes] = {
    "compact": ViewSizes(title=16, header=11, day=12, badge=10),
    "regular": ViewSizes(title=24, header=16, day=14, badge=12),
}


def build_calendar_day(
    day: date,
    reference: DateLike,
    counts: Dict[date, int],
    selected: Optional[date],
) -> CalendarDay:
    count = counts.get(day, 0)
    return CalendarDay(
        day=day,
        is_selected=selected is not None and is_same_day(day, selected),
        in_month=in_month(day, reference),
        appointment_count=count,
        badge=badge_label(count),
    )


def build_month_view(
    reference: DateLike,
    appointments: Iterable[Appointment],
    *,
    selected: Optional[DateLike] = None,
    density: Density = "regular",
    tz: Optional[tzinfo] = None,
) -> MonthView:
    ref = as_date(reference)
    chosen = as_date(selected) if selected is not None else ref
    counts = count_by_day(appointments, tz=tz)
    days = [build_calendar_day(day, ref, counts, chosen) for day in month_grid(ref)]
    start, end = grid_bounds(ref)
    return MonthView(
        reference=ref,
        title=month_title(ref),
        density=density,
        sizes=DENSITY_SIZES[density],
        weekday_labels=list(WEEKDAY_NAMES),
        start=start,
        end=end,
        weeks=chunk_weeks(days),
    )


def build_day_appointments(
    day: DateLike,
    appointments: Iterable[Appointment],
    *,
    tz: Optional[tzinfo] = None,
) -> DayAppointments:
    target = as_date(day)
    matches = sorted(
        appointments_for_day(target, appointments, tz=tz),
        key=lambda appointment: appointment.start_date,
    )
    return DayAppointments(
        day=target,
        label=day_label(target),
        total=len(matches),
        appointments=matches,
    )
