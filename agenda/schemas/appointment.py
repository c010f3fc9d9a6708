from datetime import datetime
from typing import List, Literal, Optional, Union

from pydantic import Field, model_validator

from agenda.schemas.common import ApiModel
from agenda.schemas.directory import Client, Employee, Service

AppointmentStatus = Literal["pending", "confirmed", "cancelled"]


def _check_order(start: datetime, end: datetime) -> None:
    try:
        inverted = start > end
    except TypeError as exc:
        # naive and aware datetimes cannot be compared
        raise ValueError("startDate and endDate must share timezone awareness") from exc
    if inverted:
        raise ValueError("startDate must not be after endDate")


class AdditionalItem(ApiModel):
    name: str
    price: float


class Appointment(ApiModel):
    id: str = Field(alias="_id")
    client: Client
    service: Service
    employee: Employee
    employee_requested_by_client: bool = False
    start_date: datetime
    end_date: datetime
    status: AppointmentStatus
    organization_id: str
    advance_payment: float = 0.0
    custom_price: Optional[float] = None  # overrides service.price when set
    additional_items: Optional[List[AdditionalItem]] = None
    total_price: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @model_validator(mode="after")
    def _check_date_range(self) -> "Appointment":
        _check_order(self.start_date, self.end_date)
        return self


class CreateAppointmentPayload(ApiModel):
    service: Union[Service, str]
    client: Union[Client, str]
    employee: Union[Employee, str]
    employee_requested_by_client: bool = False
    start_date: datetime
    end_date: datetime
    status: AppointmentStatus = "pending"
    organization_id: str
    advance_payment: Optional[float] = None
    custom_price: Optional[float] = None
    additional_items: Optional[List[AdditionalItem]] = None

    @model_validator(mode="after")
    def _check_date_range(self) -> "CreateAppointmentPayload":
        _check_order(self.start_date, self.end_date)
        return self


class AppointmentUpdate(ApiModel):
    service: Optional[Union[Service, str]] = None
    client: Optional[Union[Client, str]] = None
    employee: Optional[Union[Employee, str]] = None
    employee_requested_by_client: Optional[bool] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    status: Optional[AppointmentStatus] = None
    organization_id: Optional[str] = None
    advance_payment: Optional[float] = None
    custom_price: Optional[float] = None
    additional_items: Optional[List[AdditionalItem]] = None
