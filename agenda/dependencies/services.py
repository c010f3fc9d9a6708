from __future__ import annotations

from datetime import tzinfo
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import Depends

from agenda.clients.remote_api import RemoteApiClient
from agenda.config import Settings, get_settings
from agenda.services import AppointmentService, AuthContextResolver, EmployeeService


@lru_cache(maxsize=1)
def get_api_client_cached() -> RemoteApiClient:
    settings = get_settings()
    return RemoteApiClient(
        str(settings.api_base_url) if settings.api_base_url else None,
        timeout=settings.api_timeout,
        use_mock_data=settings.use_mock_data,
        token=settings.api_token,
    )


def get_api_client(settings: Settings = Depends(get_settings)) -> RemoteApiClient:
    return get_api_client_cached()


def get_appointment_service(
    client: RemoteApiClient = Depends(get_api_client),
    settings: Settings = Depends(get_settings),
) -> AppointmentService:
    return AppointmentService(client, base_path=settings.appointments_path)


def get_employee_service(
    client: RemoteApiClient = Depends(get_api_client),
    settings: Settings = Depends(get_settings),
) -> EmployeeService:
    return EmployeeService(client, base_path=settings.employees_path)


def get_auth_context_resolver(
    employees: EmployeeService = Depends(get_employee_service),
) -> AuthContextResolver:
    return AuthContextResolver(employees)


def get_calendar_timezone(settings: Settings = Depends(get_settings)) -> Optional[tzinfo]:
    if not settings.calendar_timezone:
        return None
    return ZoneInfo(settings.calendar_timezone)
