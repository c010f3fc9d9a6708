"""Parsing for ``yyyy-MM-dd`` values coming from date pickers."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional


def format_date_input(value: Optional[date]) -> str:
    if value is None:
        return ""
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _component(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return 0


def parse_date_input(
    raw: str,
    current: Optional[datetime] = None,
    *,
    today: Optional[datetime] = None,
) -> datetime:
    """Apply a ``yyyy-MM-dd`` value on top of ``current``.

    Missing or zero components fall back to today's. The time of day of
    ``current`` is kept. Out-of-range months and days roll over into the
    following months, so ``2024-13-01`` is January 1st 2025 and
    ``2024-02-31`` is March 2nd 2024. Raises ``ValueError`` when the result
    falls outside the representable years.
    """
    today = today or datetime.now()
    base = current or today
    parts = [_component(part) for part in (raw or "").strip().split("-")]
    parts += [0] * (3 - len(parts))
    year = parts[0] or today.year
    month = parts[1] or today.month
    day = parts[2] or today.day
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        target = date(year, month, 1) + timedelta(days=day - 1)
    except OverflowError as exc:
        raise ValueError(f"date out of range: {raw!r}") from exc
    return base.replace(year=target.year, month=target.month, day=target.day)
