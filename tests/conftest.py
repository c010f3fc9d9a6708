"""
Pytest configuration and shared fixtures.
"""

import os
import sys
from datetime import datetime
from typing import Any, Dict

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from agenda.schemas.appointment import Appointment
from agenda.schemas.directory import Client, Employee, Service
from agenda.services.mock_store import reset_mock_store


@pytest.fixture(autouse=True)
def _reset_store():
    reset_mock_store()
    yield
    reset_mock_store()


@pytest.fixture
def make_appointment():
    """Factory for appointments that only differ in id and start time."""

    def _make(appointment_id: str, start: datetime, **overrides: Any) -> Appointment:
        values: Dict[str, Any] = {
            "id": appointment_id,
            "client": Client(id="CLI-1", names="Ana Torres"),
            "service": Service(id="SRV-1", name="Corte de cabello", price=25.0),
            "employee": Employee(id="EMP-1", names="Laura Gómez"),
            "start_date": start,
            "end_date": start,
            "status": "confirmed",
            "organization_id": "ORG-1",
            "total_price": 25.0,
        }
        values.update(overrides)
        return Appointment(**values)

    return _make


@pytest.fixture
def appointment_json() -> Dict[str, Any]:
    """An appointment as the remote API serializes it."""
    return {
        "_id": "a1",
        "client": {"_id": "c1", "names": "Ana Torres"},
        "service": {"_id": "s1", "name": "Manicure", "price": 18},
        "employee": {"_id": "e1", "names": "Carlos Ruiz", "organizationId": "org-1"},
        "employeeRequestedByClient": True,
        "startDate": "2024-03-05T15:00:00.000Z",
        "endDate": "2024-03-05T15:30:00.000Z",
        "status": "pending",
        "organizationId": "org-1",
        "advancePayment": 5,
        "customPrice": None,
        "additionalItems": [{"name": "Esmalte semipermanente", "price": 7}],
        "totalPrice": 25,
        "createdAt": "2024-03-01T12:00:00.000Z",
        "updatedAt": "2024-03-01T12:00:00.000Z",
        "__v": 0,
    }
