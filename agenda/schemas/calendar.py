from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel

from agenda.schemas.appointment import Appointment

Density = Literal["compact", "regular"]


class CalendarDay(BaseModel):
    day: date
    is_selected: bool = False
    in_month: bool = True
    appointment_count: int = 0
    badge: Optional[str] = None  # "N citas", only when count > 0


class ViewSizes(BaseModel):
    title: int
    header: int
    day: int
    badge: int


class MonthView(BaseModel):
    reference: date
    title: str
    density: Density
    sizes: ViewSizes
    weekday_labels: List[str]
    start: date
    end: date
    weeks: List[List[CalendarDay]]


class DayAppointments(BaseModel):
    day: date
    label: str
    total: int
    appointments: List[Appointment]
