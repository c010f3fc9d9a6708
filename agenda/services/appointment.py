from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote, urlencode

from pydantic import TypeAdapter

from agenda.clients.remote_api import RemoteApiClient
from agenda.schemas.appointment import Appointment, AppointmentUpdate, CreateAppointmentPayload
from agenda.schemas.common import ApiEnvelope
from agenda.services.envelope import unwrap
from agenda.services.mock_store import AppointmentRepository, get_mock_store
from agenda.services.reporting import ErrorReporter, LoggingErrorReporter

logger = logging.getLogger(__name__)

_ONE = TypeAdapter(ApiEnvelope[Appointment])
_MANY = TypeAdapter(ApiEnvelope[List[Appointment]])


def _segment(value: str) -> str:
    return quote(str(value), safe="")


def build_organization_dates_path(
    organization_id: str,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> str:
    """Path for the organization listing, with only the bounds that are set."""
    params = []
    if start_date:
        params.append(("startDate", start_date))
    if end_date:
        params.append(("endDate", end_date))
    path = f"/organization/{_segment(organization_id)}/dates"
    if params:
        path = f"{path}?{urlencode(params)}"
    return path


class AppointmentService:
    """Appointment access layer.

    Every operation degrades instead of raising: list operations return an
    empty list, single-record operations return ``None`` and ``delete``
    returns nothing. The failure itself is only visible through ``reporter``,
    which receives exactly one report per failed call.
    """

    def __init__(
        self,
        client: RemoteApiClient,
        *,
        reporter: ErrorReporter | None = None,
        repository: AppointmentRepository | None = None,
        base_path: str = "/appointments",
    ) -> None:
        self._client = client
        self._reporter = reporter or LoggingErrorReporter()
        self._repository = repository
        self._base_path = base_path.rstrip("/")
        if self._client.use_mock_data:
            self._repository = repository if repository is not None else get_mock_store().appointments

    def _path(self, suffix: str = "/") -> str:
        return f"{self._base_path}{suffix}"

    def _mock_repository(self) -> AppointmentRepository:
        if self._repository is None:
            raise RuntimeError("Mock appointment repository not configured")
        return self._repository

    async def _get_many(self, suffix: str) -> List[Appointment]:
        body: Any = await self._client.get(self._path(suffix))
        return unwrap(_MANY, body)

    async def _get_one(self, suffix: str) -> Appointment:
        body: Any = await self._client.get(self._path(suffix))
        return unwrap(_ONE, body)

    async def list_all(self) -> List[Appointment]:
        logger.info("Listing all appointments")
        try:
            if self._client.use_mock_data:
                await self._client.simulate_latency()
                return await self._mock_repository().list_all()
            return await self._get_many("/")
        except Exception as exc:
            self._reporter.report("Error al obtener las citas", exc)
            return []

    async def list_by_organization(
        self,
        organization_id: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[Appointment]:
        logger.info(
            "Listing appointments for organization %s (%s - %s)",
            organization_id,
            start_date,
            end_date,
        )
        try:
            if self._client.use_mock_data:
                await self._client.simulate_latency()
                return await self._mock_repository().list_by_organization(
                    organization_id, start_date, end_date
                )
            return await self._get_many(
                build_organization_dates_path(organization_id, start_date, end_date)
            )
        except Exception as exc:
            self._reporter.report("Error al obtener las citas por organización", exc)
            return []

    async def get_by_id(self, appointment_id: str) -> Optional[Appointment]:
        logger.info("Fetching appointment %s", appointment_id)
        try:
            if self._client.use_mock_data:
                await self._client.simulate_latency()
                return await self._mock_repository().get(appointment_id)
            return await self._get_one(f"/{_segment(appointment_id)}")
        except Exception as exc:
            self._reporter.report("Error al obtener la cita", exc)
            return None

    async def list_by_employee(self, employee_id: str) -> List[Appointment]:
        logger.info("Listing appointments for employee %s", employee_id)
        try:
            if self._client.use_mock_data:
                await self._client.simulate_latency()
                return await self._mock_repository().list_by_employee(employee_id)
            return await self._get_many(f"/employee/{_segment(employee_id)}")
        except Exception as exc:
            self._reporter.report("Error al obtener las citas", exc)
            return []

    async def list_by_client(self, client_id: str) -> List[Appointment]:
        logger.info("Listing appointments for client %s", client_id)
        try:
            if self._client.use_mock_data:
                await self._client.simulate_latency()
                return await self._mock_repository().list_by_client(client_id)
            return await self._get_many(f"/client/{_segment(client_id)}")
        except Exception as exc:
            self._reporter.report("Error al obtener las citas, por cliente.", exc)
            return []

    async def create(self, payload: CreateAppointmentPayload) -> Optional[Appointment]:
        logger.info("Creating appointment for organization %s", payload.organization_id)
        try:
            if self._client.use_mock_data:
                await self._client.simulate_latency()
                return await self._mock_repository().create(payload)
            body = await self._client.post(
                self._path("/"),
                payload.model_dump(mode="json", by_alias=True, exclude_none=True),
            )
            return unwrap(_ONE, body)
        except Exception as exc:
            self._reporter.report("Error al crear la cita", exc)
            return None

    async def update(
        self, appointment_id: str, changes: AppointmentUpdate
    ) -> Optional[Appointment]:
        logger.info("Updating appointment %s", appointment_id)
        try:
            if self._client.use_mock_data:
                await self._client.simulate_latency()
                return await self._mock_repository().update(appointment_id, changes)
            body = await self._client.put(
                self._path(f"/{_segment(appointment_id)}"),
                changes.model_dump(mode="json", by_alias=True, exclude_unset=True),
            )
            return unwrap(_ONE, body)
        except Exception as exc:
            self._reporter.report("Error al actualizar la cita", exc)
            return None

    async def delete(self, appointment_id: str) -> None:
        logger.info("Deleting appointment %s", appointment_id)
        try:
            if self._client.use_mock_data:
                await self._client.simulate_latency()
                await self._mock_repository().delete(appointment_id)
                return
            await self._client.delete(self._path(f"/{_segment(appointment_id)}"))
        except Exception as exc:
            self._reporter.report("Error al eliminar la cita", exc)
