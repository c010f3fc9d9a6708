from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from agenda.dependencies.services import get_appointment_service
from agenda.schemas.appointment import Appointment, AppointmentUpdate, CreateAppointmentPayload
from agenda.services import AppointmentService

router = APIRouter()


@router.get("", response_model=List[Appointment])
async def list_appointments(
    service: AppointmentService = Depends(get_appointment_service),
):
    return await service.list_all()


@router.get("/organization/{organization_id}", response_model=List[Appointment])
async def list_organization_appointments(
    organization_id: str,
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    service: AppointmentService = Depends(get_appointment_service),
):
    return await service.list_by_organization(organization_id, start_date, end_date)


@router.get("/employee/{employee_id}", response_model=List[Appointment])
async def list_employee_appointments(
    employee_id: str,
    service: AppointmentService = Depends(get_appointment_service),
):
    return await service.list_by_employee(employee_id)


@router.get("/client/{client_id}", response_model=List[Appointment])
async def list_client_appointments(
    client_id: str,
    service: AppointmentService = Depends(get_appointment_service),
):
    return await service.list_by_client(client_id)


@router.get("/{appointment_id}", response_model=Appointment)
async def get_appointment(
    appointment_id: str,
    service: AppointmentService = Depends(get_appointment_service),
):
    appointment = await service.get_by_id(appointment_id)
    if appointment is None:
        raise HTTPException(status_code=404, detail="Cita no encontrada")
    return appointment


@router.post("", response_model=Appointment, status_code=201)
async def create_appointment(
    req: CreateAppointmentPayload,
    service: AppointmentService = Depends(get_appointment_service),
):
    appointment = await service.create(req)
    if appointment is None:
        raise HTTPException(status_code=502, detail="No se pudo crear la cita")
    return appointment


@router.put("/{appointment_id}", response_model=Appointment)
async def update_appointment(
    appointment_id: str,
    req: AppointmentUpdate,
    service: AppointmentService = Depends(get_appointment_service),
):
    appointment = await service.update(appointment_id, req)
    if appointment is None:
        raise HTTPException(status_code=502, detail="No se pudo actualizar la cita")
    return appointment


@router.delete("/{appointment_id}", status_code=204)
async def delete_appointment(
    appointment_id: str,
    service: AppointmentService = Depends(get_appointment_service),
):
    await service.delete(appointment_id)
    return Response(status_code=204)
