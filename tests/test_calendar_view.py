from datetime import date, datetime, timedelta, timezone

import pytest

from agenda.calendar.date_input import format_date_input, parse_date_input
from agenda.calendar.html import render_month_view
from agenda.calendar.locale import badge_label, day_label, month_title, weekday_name
from agenda.calendar.matching import appointments_for_day, count_by_day
from agenda.calendar.view import build_day_appointments, build_month_view


def test_appointments_for_day_matches_calendar_day_only(make_appointment) -> None:
    morning = make_appointment("a1", datetime(2024, 3, 5, 8, 0))
    evening = make_appointment("a2", datetime(2024, 3, 5, 23, 59))
    next_day = make_appointment("a3", datetime(2024, 3, 6, 0, 0))
    other_month = make_appointment("a4", datetime(2024, 4, 5, 8, 0))
    appointments = [morning, next_day, evening, other_month]

    result = appointments_for_day(date(2024, 3, 5), appointments)

    assert [item.id for item in result] == ["a1", "a2"]


def test_appointments_for_day_with_empty_collection() -> None:
    assert appointments_for_day(date(2024, 3, 5), []) == []


def test_aware_timestamps_keep_their_wall_clock_day(make_appointment) -> None:
    bogota = timezone(timedelta(hours=-5))
    late = make_appointment("a1", datetime(2024, 3, 5, 23, 30, tzinfo=bogota))

    assert appointments_for_day(date(2024, 3, 5), [late]) == [late]
    assert appointments_for_day(date(2024, 3, 6), [late], tz=timezone.utc) == [late]
    assert appointments_for_day(date(2024, 3, 5), [late], tz=timezone.utc) == []


def test_count_by_day(make_appointment) -> None:
    appointments = [
        make_appointment("a1", datetime(2024, 3, 5, 9)),
        make_appointment("a2", datetime(2024, 3, 5, 11)),
        make_appointment("a3", datetime(2024, 3, 7, 9)),
    ]

    assert count_by_day(appointments) == {date(2024, 3, 5): 2, date(2024, 3, 7): 1}


def test_locale_table() -> None:
    assert month_title(date(2024, 3, 1)) == "MARZO 2024"
    assert weekday_name(date(2024, 3, 1)) == "Viernes"
    assert weekday_name(date(2024, 3, 3)) == "Domingo"
    assert day_label(date(2024, 3, 5)) == "Martes 5 de marzo de 2024"


def test_badge_only_when_there_are_appointments() -> None:
    assert badge_label(0) is None
    assert badge_label(1) == "1 citas"
    assert badge_label(4) == "4 citas"


def test_month_view_counts_and_flags(make_appointment) -> None:
    appointments = [
        make_appointment("a1", datetime(2024, 3, 5, 9)),
        make_appointment("a2", datetime(2024, 3, 5, 15)),
        make_appointment("a3", datetime(2024, 2, 26, 10)),
    ]

    view = build_month_view(date(2024, 3, 1), appointments, density="compact")
    days = {day.day: day for week in view.weeks for day in week}

    assert view.title == "MARZO 2024"
    assert view.weekday_labels[0] == "Domingo"
    assert view.sizes.title == 16
    assert view.start == date(2024, 2, 25)
    assert view.end == date(2024, 4, 6)
    assert len(view.weeks) == 6

    assert days[date(2024, 3, 5)].appointment_count == 2
    assert days[date(2024, 3, 5)].badge == "2 citas"
    assert days[date(2024, 3, 6)].badge is None
    assert days[date(2024, 2, 26)].in_month is False
    assert days[date(2024, 2, 26)].appointment_count == 1

    selected = [day.day for day in days.values() if day.is_selected]
    assert selected == [date(2024, 3, 1)]


def test_month_view_explicit_selection_and_regular_density() -> None:
    view = build_month_view(date(2024, 6, 15), [], selected=date(2024, 7, 2))
    selected = [day.day for week in view.weeks for day in week if day.is_selected]

    assert selected == [date(2024, 7, 2)]
    assert view.sizes.title == 24
    assert all(day.appointment_count == 0 for week in view.weeks for day in week)


def test_day_appointments_are_sorted_by_start(make_appointment) -> None:
    appointments = [
        make_appointment("late", datetime(2024, 3, 5, 17)),
        make_appointment("early", datetime(2024, 3, 5, 8)),
        make_appointment("other", datetime(2024, 3, 6, 8)),
    ]

    result = build_day_appointments(date(2024, 3, 5), appointments)

    assert result.total == 2
    assert [item.id for item in result.appointments] == ["early", "late"]
    assert result.label == "Martes 5 de marzo de 2024"


def test_render_month_view_links_each_day(make_appointment) -> None:
    view = build_month_view(
        date(2024, 3, 1), [make_appointment("a1", datetime(2024, 3, 5, 9))]
    )

    page = render_month_view(view, lambda day: f"/days/{day.day.isoformat()}")

    assert "MARZO 2024" in page
    assert "1 citas" in page
    assert 'href="/days/2024-03-05"' in page
    assert 'href="/days/2024-04-06"' in page
    assert page.count('class="day') == 42


def test_parse_date_input_keeps_time_of_current_value() -> None:
    current = datetime(2023, 1, 1, 9, 30)
    today = datetime(2025, 6, 10, 8, 0)

    assert parse_date_input("2024-03-15", current, today=today) == datetime(2024, 3, 15, 9, 30)


def test_parse_date_input_falls_back_to_today() -> None:
    today = datetime(2025, 6, 10, 8, 0)

    assert parse_date_input("", today=today) == today
    assert parse_date_input("2024-xx-05", today=today) == datetime(2024, 6, 5, 8, 0)


def test_parse_date_input_rolls_over_out_of_range_parts() -> None:
    today = datetime(2025, 6, 10, 8, 0)

    assert parse_date_input("2024-02-31", today=today) == datetime(2024, 3, 2, 8, 0)
    assert parse_date_input("2024-13-01", today=today) == datetime(2025, 1, 1, 8, 0)
    assert parse_date_input("2024-14-40", today=today) == datetime(2025, 3, 12, 8, 0)


def test_parse_date_input_rejects_dates_past_the_last_year() -> None:
    with pytest.raises(ValueError):
        parse_date_input("9999-12-32", today=datetime(2025, 6, 10))


def test_format_date_input() -> None:
    assert format_date_input(date(2024, 3, 5)) == "2024-03-05"
    assert format_date_input(None) == ""


def test_format_date_input_pads_early_years() -> None:
    assert format_date_input(date(1, 1, 1)) == "0001-01-01"
