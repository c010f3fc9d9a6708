from datetime import date, tzinfo
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from agenda.calendar.date_input import format_date_input, parse_date_input
from agenda.calendar.html import render_month_view
from agenda.calendar.month_grid import grid_bounds
from agenda.calendar.view import build_day_appointments, build_month_view
from agenda.dependencies.services import get_appointment_service, get_calendar_timezone
from agenda.schemas.calendar import DayAppointments, Density, MonthView
from agenda.services import AppointmentService

router = APIRouter()


def _reference(raw: Optional[str]) -> date:
    try:
        return parse_date_input(raw or "").date()
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=f"Fecha inválida: {raw}") from exc


async def _month_view(
    organization_id: str,
    raw_reference: Optional[str],
    raw_selected: Optional[str],
    density: Density,
    service: AppointmentService,
    tz: Optional[tzinfo],
) -> MonthView:
    reference = _reference(raw_reference)
    selected = _reference(raw_selected) if raw_selected else reference
    start, end = grid_bounds(reference)
    # One fetch for the whole grid; days are matched locally.
    appointments = await service.list_by_organization(
        organization_id, format_date_input(start), format_date_input(end)
    )
    return build_month_view(reference, appointments, selected=selected, density=density, tz=tz)


@router.get("/{organization_id}/month", response_model=MonthView)
async def month_view(
    organization_id: str,
    reference: Optional[str] = Query(default=None, alias="date"),
    selected: Optional[str] = None,
    density: Density = "regular",
    service: AppointmentService = Depends(get_appointment_service),
    tz: Optional[tzinfo] = Depends(get_calendar_timezone),
):
    return await _month_view(organization_id, reference, selected, density, service, tz)


@router.get("/{organization_id}/month.html", response_class=HTMLResponse)
async def month_view_html(
    organization_id: str,
    reference: Optional[str] = Query(default=None, alias="date"),
    selected: Optional[str] = None,
    density: Density = "regular",
    service: AppointmentService = Depends(get_appointment_service),
    tz: Optional[tzinfo] = Depends(get_calendar_timezone),
) -> HTMLResponse:
    view = await _month_view(organization_id, reference, selected, density, service, tz)
    content = render_month_view(
        view,
        lambda day: f"/calendar/{organization_id}/day/{format_date_input(day.day)}",
    )
    return HTMLResponse(content=content)


@router.get("/{organization_id}/day/{day}", response_model=DayAppointments)
async def day_appointments(
    organization_id: str,
    day: str,
    service: AppointmentService = Depends(get_appointment_service),
    tz: Optional[tzinfo] = Depends(get_calendar_timezone),
):
    selected = _reference(day)
    bound = format_date_input(selected)
    appointments = await service.list_by_organization(organization_id, bound, bound)
    return build_day_appointments(selected, appointments, tz=tz)
