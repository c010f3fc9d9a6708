from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

from pydantic import TypeAdapter

from agenda.clients.remote_api import RemoteApiClient
from agenda.schemas.common import ApiEnvelope
from agenda.schemas.directory import Employee
from agenda.services.envelope import unwrap
from agenda.services.mock_store import DirectoryRepository, get_mock_store
from agenda.services.reporting import ErrorReporter, LoggingErrorReporter

logger = logging.getLogger(__name__)

_EMPLOYEE = TypeAdapter(ApiEnvelope[Employee])


class EmployeeService:
    """Single-record employee lookup used to bootstrap employee sessions."""

    def __init__(
        self,
        client: RemoteApiClient,
        *,
        reporter: ErrorReporter | None = None,
        directory: DirectoryRepository | None = None,
        base_path: str = "/employees",
    ) -> None:
        self._client = client
        self._reporter = reporter or LoggingErrorReporter()
        self._directory = directory
        self._base_path = base_path.rstrip("/")
        if self._client.use_mock_data:
            self._directory = directory or get_mock_store().directory

    async def get_by_id(self, employee_id: str) -> Optional[Employee]:
        logger.info("Fetching employee %s", employee_id)
        try:
            if self._client.use_mock_data:
                await self._client.simulate_latency()
                if self._directory is None:
                    raise RuntimeError("Mock directory not configured")
                return self._directory.get_employee(employee_id)
            body = await self._client.get(f"{self._base_path}/{quote(employee_id, safe='')}")
            return unwrap(_EMPLOYEE, body)
        except Exception as exc:
            self._reporter.report("Error al obtener el empleado", exc)
            return None
