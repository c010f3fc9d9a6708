from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from agenda.schemas.directory import Organization

UserRole = Literal["admin", "employee"]


class AuthContext(BaseModel):
    user_id: str
    role: UserRole
    organization_id: str
    permissions: List[str] = Field(default_factory=list)


class SessionContextRequest(BaseModel):
    user_id: Optional[str] = None
    role: Optional[str] = None
    organization: Optional[Organization] = None
    organization_loading: bool = False
