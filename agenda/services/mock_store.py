from __future__ import annotations

import itertools
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, TypeVar, Union

from pydantic import BaseModel

from agenda.schemas.appointment import (
    AdditionalItem,
    Appointment,
    AppointmentUpdate,
    CreateAppointmentPayload,
)
from agenda.schemas.directory import Client, Employee, Organization, Role, Service

M = TypeVar("M", bound=BaseModel)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def compute_total_price(
    service: Service,
    custom_price: Optional[float],
    additional_items: Optional[Iterable[AdditionalItem]],
) -> float:
    """Charged price (custom price, else the service's) plus every additional item."""
    base = custom_price if custom_price is not None else service.price
    return float(base) + sum(item.price for item in additional_items or [])


class _BaseRepository:
    def __init__(self, prefix: str) -> None:
        self._prefix = prefix
        self._counter = itertools.count(1)

    def _next_id(self) -> str:
        return f"{self._prefix}-{next(self._counter):05d}"


class DirectoryRepository:
    """Organizations, clients, services and employees referenced by appointments."""

    def __init__(self) -> None:
        self._organizations: Dict[str, Organization] = {}
        self._clients: Dict[str, Client] = {}
        self._services: Dict[str, Service] = {}
        self._employees: Dict[str, Employee] = {}
        self._seed_directory()

    def _seed_directory(self) -> None:
        self.add_organization(
            Organization(
                id="ORG-00001",
                name="Estudio Aurora",
                role=Role(
                    name="admin",
                    permissions=[
                        "appointments:read",
                        "appointments:write",
                        "clients:read",
                        "clients:write",
                        "employees:read",
                    ],
                ),
            )
        )

        for client in (
            Client(id="CLI-00001", names="Ana Torres", phone_number="+57 300 111 2233", email="ana@example.com"),
            Client(id="CLI-00002", names="Marta Díaz", phone_number="+57 300 444 5566"),
        ):
            self.add_client(client)

        for service in (
            Service(id="SRV-00001", name="Corte de cabello", price=25.0, duration=45),
            Service(id="SRV-00002", name="Manicure", price=18.0, duration=30),
            Service(id="SRV-00003", name="Coloración", price=60.0, duration=90),
        ):
            self.add_service(service)

        for employee in (
            Employee(
                id="EMP-00001",
                names="Laura Gómez",
                email="laura@example.com",
                organization_id="ORG-00001",
                role=Role(name="employee", permissions=["appointments:read"]),
            ),
            Employee(
                id="EMP-00002",
                names="Carlos Ruiz",
                organization_id="ORG-00001",
                role=Role(name="employee", permissions=["appointments:read", "appointments:write"]),
            ),
        ):
            self.add_employee(employee)

    def add_organization(self, record: Organization) -> None:
        self._organizations[record.id] = record

    def add_client(self, record: Client) -> None:
        self._clients[record.id] = record

    def add_service(self, record: Service) -> None:
        self._services[record.id] = record

    def add_employee(self, record: Employee) -> None:
        self._employees[record.id] = record

    def get_organization(self, organization_id: str) -> Optional[Organization]:
        return self._organizations.get(organization_id)

    def get_client(self, client_id: str) -> Optional[Client]:
        return self._clients.get(client_id)

    def get_service(self, service_id: str) -> Optional[Service]:
        return self._services.get(service_id)

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def iter_employees(self) -> Iterable[Employee]:
        return self._employees.values()


def _resolve(
    reference: Union[M, str],
    lookup: Callable[[str], Optional[M]],
    kind: str,
) -> M:
    if not isinstance(reference, str):
        return reference
    record = lookup(reference)
    if record is None:
        raise LookupError(f"Unknown {kind} '{reference}'")
    return record


def _parse_bound(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    return date.fromisoformat(value.strip()[:10])


class AppointmentRepository(_BaseRepository):
    def __init__(self, directory: DirectoryRepository | None = None) -> None:
        super().__init__("APT")
        self._directory = directory or DirectoryRepository()
        self._appointments: Dict[str, Appointment] = {}
        self._seed_defaults()

    def _seed_defaults(self) -> None:
        seeds = [
            CreateAppointmentPayload(
                client="CLI-00001",
                service="SRV-00001",
                employee="EMP-00001",
                start_date=datetime(2024, 3, 5, 10, 0),
                end_date=datetime(2024, 3, 5, 10, 45),
                status="confirmed",
                organization_id="ORG-00001",
                advance_payment=10.0,
            ),
            CreateAppointmentPayload(
                client="CLI-00002",
                service="SRV-00002",
                employee="EMP-00002",
                start_date=datetime(2024, 3, 5, 15, 0),
                end_date=datetime(2024, 3, 5, 15, 30),
                status="pending",
                organization_id="ORG-00001",
                custom_price=15.0,
            ),
            CreateAppointmentPayload(
                client="CLI-00001",
                service="SRV-00003",
                employee="EMP-00001",
                employee_requested_by_client=True,
                start_date=datetime(2024, 3, 18, 9, 0),
                end_date=datetime(2024, 3, 18, 10, 30),
                status="confirmed",
                organization_id="ORG-00001",
                advance_payment=30.0,
                additional_items=[AdditionalItem(name="Tratamiento de keratina", price=20.0)],
            ),
        ]
        for payload in seeds:
            appointment = self._build(self._next_id(), payload)
            self._appointments[appointment.id] = appointment

    @property
    def directory(self) -> DirectoryRepository:
        return self._directory

    def _build(self, appointment_id: str, payload: CreateAppointmentPayload) -> Appointment:
        client = _resolve(payload.client, self._directory.get_client, "client")
        service = _resolve(payload.service, self._directory.get_service, "service")
        employee = _resolve(payload.employee, self._directory.get_employee, "employee")
        now = _utc_now()
        return Appointment(
            id=appointment_id,
            client=client,
            service=service,
            employee=employee,
            employee_requested_by_client=payload.employee_requested_by_client,
            start_date=payload.start_date,
            end_date=payload.end_date,
            status=payload.status,
            organization_id=payload.organization_id,
            advance_payment=payload.advance_payment or 0.0,
            custom_price=payload.custom_price,
            additional_items=payload.additional_items,
            total_price=compute_total_price(service, payload.custom_price, payload.additional_items),
            created_at=now,
            updated_at=now,
        )

    def _sorted(self, records: Iterable[Appointment]) -> List[Appointment]:
        return sorted(records, key=lambda record: record.start_date)

    async def list_all(self) -> List[Appointment]:
        return self._sorted(self._appointments.values())

    async def list_by_organization(
        self,
        organization_id: str,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[Appointment]:
        lower = _parse_bound(start_date)
        upper = _parse_bound(end_date)
        matches = []
        for record in self._appointments.values():
            if record.organization_id != organization_id:
                continue
            day = record.start_date.date()
            if lower and day < lower:
                continue
            if upper and day > upper:
                continue
            matches.append(record)
        return self._sorted(matches)

    async def list_by_employee(self, employee_id: str) -> List[Appointment]:
        return self._sorted(
            record for record in self._appointments.values() if record.employee.id == employee_id
        )

    async def list_by_client(self, client_id: str) -> List[Appointment]:
        return self._sorted(
            record for record in self._appointments.values() if record.client.id == client_id
        )

    async def get(self, appointment_id: str) -> Optional[Appointment]:
        return self._appointments.get(appointment_id)

    async def create(self, payload: CreateAppointmentPayload) -> Appointment:
        appointment = self._build(self._next_id(), payload)
        self._appointments[appointment.id] = appointment
        return appointment

    async def update(
        self, appointment_id: str, changes: AppointmentUpdate
    ) -> Optional[Appointment]:
        existing = self._appointments.get(appointment_id)
        if existing is None:
            return None

        fields = {name: getattr(changes, name) for name in changes.model_fields_set}
        lookups = {
            "client": self._directory.get_client,
            "service": self._directory.get_service,
            "employee": self._directory.get_employee,
        }
        for name, lookup in lookups.items():
            if fields.get(name) is not None:
                fields[name] = _resolve(fields[name], lookup, name)

        merged = existing.model_copy(update=fields)
        merged = merged.model_copy(
            update={
                "total_price": compute_total_price(
                    merged.service, merged.custom_price, merged.additional_items
                ),
                "updated_at": _utc_now(),
            }
        )
        # Re-validate so the date range and status rules still hold.
        updated = Appointment.model_validate(merged.model_dump())
        self._appointments[appointment_id] = updated
        return updated

    async def delete(self, appointment_id: str) -> bool:
        return self._appointments.pop(appointment_id, None) is not None

    def __len__(self) -> int:
        return len(self._appointments)


@dataclass
class MockDataStore:
    directory: DirectoryRepository
    appointments: AppointmentRepository


_mock_store: Optional[MockDataStore] = None


def get_mock_store() -> MockDataStore:
    global _mock_store
    if _mock_store is None:
        directory = DirectoryRepository()
        appointments = AppointmentRepository(directory)
        _mock_store = MockDataStore(directory=directory, appointments=appointments)
    return _mock_store


def reset_mock_store() -> None:
    global _mock_store
    _mock_store = None
