"""Service package public API definitions.

Service implementations are imported lazily. ``agenda.clients.remote_api``
imports ``agenda.services.exceptions``, and importing every service eagerly
from here would pull the client back in and create a circular import.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "AppointmentService",
    "AuthContextResolver",
    "EmployeeService",
]

_SERVICE_MODULES = {
    "AppointmentService": "appointment",
    "AuthContextResolver": "auth_context",
    "EmployeeService": "employee",
}


def __getattr__(name: str) -> Any:
    if name not in _SERVICE_MODULES:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module = import_module(f".{_SERVICE_MODULES[name]}", __name__)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from .appointment import AppointmentService as AppointmentService
    from .auth_context import AuthContextResolver as AuthContextResolver
    from .employee import EmployeeService as EmployeeService
