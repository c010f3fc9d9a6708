"""Resolution of the organization and permissions a signed-in user acts under."""

from __future__ import annotations

import logging
from typing import Optional

from agenda.schemas.directory import Organization
from agenda.schemas.session import AuthContext
from agenda.services.employee import EmployeeService

logger = logging.getLogger(__name__)


class AuthContextResolver:
    """Turns session state into plain ``AuthContext`` parameters.

    Admins act under their own organization; employees act under the
    organization recorded on their employee profile, which is fetched
    remotely. Nothing is resolved while the organization is still loading.
    """

    def __init__(self, employees: EmployeeService) -> None:
        self._employees = employees

    async def resolve(
        self,
        *,
        role: Optional[str],
        user_id: Optional[str],
        organization: Optional[Organization],
        organization_loading: bool = False,
    ) -> Optional[AuthContext]:
        if organization_loading or organization is None or not user_id:
            return None

        try:
            if role == "admin":
                permissions = organization.role.permissions if organization.role else []
                return AuthContext(
                    user_id=user_id,
                    role="admin",
                    organization_id=organization.id,
                    permissions=list(permissions),
                )
            if role == "employee":
                employee = await self._employees.get_by_id(user_id)
                if employee is None or not employee.organization_id:
                    return None
                permissions = employee.role.permissions if employee.role else []
                return AuthContext(
                    user_id=user_id,
                    role="employee",
                    organization_id=employee.organization_id,
                    permissions=list(permissions),
                )
        except Exception:
            logger.exception("Error al obtener los permisos")
            return None

        logger.debug("No auth context for role %r", role)
        return None
