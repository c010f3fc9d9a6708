from typing import List, Optional

from pydantic import Field

from agenda.schemas.common import ApiModel


class Role(ApiModel):
    name: Optional[str] = None
    permissions: List[str] = Field(default_factory=list)


class Client(ApiModel):
    id: str = Field(alias="_id")
    names: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None


class Service(ApiModel):
    id: str = Field(alias="_id")
    name: Optional[str] = None
    price: float = 0.0
    duration: Optional[int] = None  # minutes


class Employee(ApiModel):
    id: str = Field(alias="_id")
    names: Optional[str] = None
    email: Optional[str] = None
    organization_id: Optional[str] = None
    role: Optional[Role] = None


class Organization(ApiModel):
    id: str = Field(alias="_id")
    name: Optional[str] = None
    role: Optional[Role] = None
