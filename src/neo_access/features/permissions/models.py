"""Request and response models for role management.

Commands carry caller input into :class:`RoleService`; views carry role state
back out. Only fields explicitly set on an update command are applied, which
is how "leave unchanged" is told apart from "clear".
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .entities.role import Role


class CreateRoleCommand(BaseModel):
    """Input for creating a role."""

    name: str = Field(min_length=1, max_length=100)
    display_name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    permissions: List[str] = Field(default_factory=list)
    is_active: bool = True
    tenant_id: Optional[str] = None


class UpdateRoleCommand(BaseModel):
    """Input for updating a role. Unset fields are left untouched."""

    role_id: str
    display_name: Optional[str] = None
    description: Optional[str] = None
    permissions: Optional[List[str]] = None
    is_active: Optional[bool] = None


class ListRolesQuery(BaseModel):
    """Filters and paging for role listing."""

    tenant_id: Optional[str] = None
    is_active: Optional[bool] = None
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)


class RoleView(BaseModel):
    """Full role state returned by the service."""

    model_config = ConfigDict(frozen=True)

    role_id: str
    name: str
    display_name: str
    description: Optional[str] = None
    permissions: List[str]
    is_active: bool
    tenant_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_role(cls, role: Role) -> "RoleView":
        return cls(
            role_id=role.id,
            name=role.name,
            display_name=role.display_name,
            description=role.description,
            permissions=list(role.permissions),
            is_active=role.is_active,
            tenant_id=role.tenant_id,
            created_at=role.created_at,
            updated_at=role.updated_at,
        )


class RoleListItem(BaseModel):
    """Summary row for role listings."""

    model_config = ConfigDict(frozen=True)

    role_id: str
    name: str
    display_name: str
    description: Optional[str] = None
    permission_count: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_role(cls, role: Role) -> "RoleListItem":
        return cls(
            role_id=role.id,
            name=role.name,
            display_name=role.display_name,
            description=role.description,
            permission_count=len(role.permissions),
            is_active=role.is_active,
            created_at=role.created_at,
            updated_at=role.updated_at,
        )


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class ListRolesResult(BaseModel):
    roles: List[RoleListItem]
    pagination: Pagination


class DeleteRoleResult(BaseModel):
    role_id: str
    name: str
    deleted: bool = True
    deleted_at: datetime
