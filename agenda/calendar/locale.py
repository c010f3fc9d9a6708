from __future__ import annotations

from datetime import date
from typing import Optional

# Sunday first, matching the grid layout.
WEEKDAY_NAMES = (
    "Domingo",
    "Lunes",
    "Martes",
    "Miércoles",
    "Jueves",
    "Viernes",
    "Sábado",
)

MONTH_NAMES = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)

APPOINTMENT_LABEL = "citas"


def month_name(value: date) -> str:
    return MONTH_NAMES[value.month - 1]


def weekday_name(value: date) -> str:
    return WEEKDAY_NAMES[(value.weekday() + 1) % 7]


def month_title(value: date) -> str:
    return f"{month_name(value)} {value.year}".upper()


def day_label(value: date) -> str:
    """Long form used for a selected day, e.g. ``Viernes 1 de marzo de 2024``."""
    return f"{weekday_name(value)} {value.day} de {month_name(value)} de {value.year}"


def badge_label(count: int) -> Optional[str]:
    if count <= 0:
        return None
    return f"{count} {APPOINTMENT_LABEL}"
