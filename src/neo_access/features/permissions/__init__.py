"""Permissions feature for neo-access.

Feature-First layout for permission and role management:
- entities/: Permission value object, Role aggregate and protocols
- services/: Authorization checks and role lifecycle orchestration
- repositories/: Role storage implementations
- models.py: Commands and views exchanged with the service layer
"""

from .entities import (
    Permission, Role, RoleRecord, UNSET,
    RoleFilters, RoleRepository,
    validate_permissions, role_from_record,
)

from .models import (
    CreateRoleCommand, UpdateRoleCommand, ListRolesQuery,
    RoleView, RoleListItem, ListRolesResult, DeleteRoleResult,
)

from .services import AuthorizationResult, AuthorizationService, RoleService

from .repositories import InMemoryRoleRepository

__all__ = [
    # Entities
    "Permission",
    "Role",
    "RoleRecord",
    "UNSET",
    "validate_permissions",
    "role_from_record",

    # Protocols
    "RoleFilters",
    "RoleRepository",

    # Models
    "CreateRoleCommand",
    "UpdateRoleCommand",
    "ListRolesQuery",
    "RoleView",
    "RoleListItem",
    "ListRolesResult",
    "DeleteRoleResult",

    # Services
    "AuthorizationResult",
    "AuthorizationService",
    "RoleService",

    # Repository Implementations
    "InMemoryRoleRepository",
]
