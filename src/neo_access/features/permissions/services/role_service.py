"""Role management service.

Orchestrates role creation, updates, deletion, listing and default seeding
on top of a :class:`RoleRepository`. Permission strings are validated here,
before they reach a role; the role aggregate itself stores whatever it is
given.
"""

import logging
import math
from typing import List, Optional

from ....config.constants import DEFAULT_ROLE_DEFINITIONS
from ....config.settings import AccessSettings, get_settings
from ....core.exceptions import DuplicateRoleError, InvalidRoleError, RoleNotFoundError
from ....utils import utc_now
from ..entities.permission import Permission, validate_permissions
from ..entities.protocols import RoleFilters, RoleRepository
from ..entities.role import Clock, IdFactory, Role, UNSET
from ..models import (
    CreateRoleCommand,
    DeleteRoleResult,
    ListRolesQuery,
    ListRolesResult,
    Pagination,
    RoleListItem,
    RoleView,
    UpdateRoleCommand,
)


logger = logging.getLogger(__name__)


class RoleService:
    """Service orchestrating role lifecycle operations."""

    def __init__(
        self,
        role_repository: RoleRepository,
        settings: Optional[AccessSettings] = None,
        id_factory: Optional[IdFactory] = None,
        clock: Optional[Clock] = None
    ):
        self.role_repository = role_repository
        self.settings = settings or get_settings()
        self.id_factory = id_factory
        self.clock = clock or utc_now

    async def _get_existing(self, role_id: str) -> Role:
        role = await self.role_repository.find_by_id(role_id)
        if role is None:
            raise RoleNotFoundError(
                f"Role with ID {role_id} not found",
                details={"role_id": role_id},
            )
        return role

    async def create_role(self, command: CreateRoleCommand) -> RoleView:
        """
        Create a role.

        Raises:
            InvalidRoleError: Blank name or display name
            InvalidPermissionError: Malformed permission string
            DuplicateRoleError: Name already used in the same tenant, or by
                another global role when ``tenant_id`` is None
        """
        name = command.name.strip()
        if not name or not command.display_name.strip():
            raise InvalidRoleError("Role name and display name must not be blank")

        validate_permissions(command.permissions)

        existing = await self.role_repository.find_by_name_in_tenant(name, command.tenant_id or None)
        if existing is not None:
            raise DuplicateRoleError(
                f"Role with name {name} already exists",
                details={"name": name, "tenant_id": command.tenant_id},
            )

        role = Role.create(
            name=name,
            display_name=command.display_name,
            description=command.description,
            permissions=command.permissions,
            tenant_id=command.tenant_id,
            id_factory=self.id_factory,
            clock=self.clock,
        )
        if not command.is_active:
            role.deactivate()

        await self.role_repository.save(role)
        logger.info(f"Created role {role.name} ({role.id}) with {len(role.permissions)} permissions")
        return RoleView.from_role(role)

    async def get_role(self, role_id: str) -> RoleView:
        """Get a role by id."""
        return RoleView.from_role(await self._get_existing(role_id))

    async def update_role(self, command: UpdateRoleCommand) -> RoleView:
        """
        Apply the fields explicitly set on ``command``.

        Raises:
            RoleNotFoundError: Unknown role id
            InvalidPermissionError: Malformed permission string
        """
        role = await self._get_existing(command.role_id)
        fields = command.model_fields_set

        if "permissions" in fields and command.permissions is not None:
            validate_permissions(command.permissions)

        if "display_name" in fields or "description" in fields:
            role.update_details(
                display_name=command.display_name if "display_name" in fields else UNSET,
                description=command.description if "description" in fields else UNSET,
            )

        if "permissions" in fields and command.permissions is not None:
            role.set_permissions(command.permissions)

        if "is_active" in fields and command.is_active is not None:
            if command.is_active:
                role.activate()
            else:
                role.deactivate()

        await self.role_repository.save(role)
        logger.info(f"Updated role {role.name} ({role.id}): {sorted(fields - {'role_id'})}")
        return RoleView.from_role(role)

    async def add_permission(self, role_id: str, permission: str) -> RoleView:
        """Validate and add a single permission to a role."""
        Permission.create(permission)
        role = await self._get_existing(role_id)
        role.add_permission(permission)
        await self.role_repository.save(role)
        return RoleView.from_role(role)

    async def remove_permission(self, role_id: str, permission: str) -> RoleView:
        role = await self._get_existing(role_id)
        role.remove_permission(permission)
        await self.role_repository.save(role)
        return RoleView.from_role(role)

    async def delete_role(self, role_id: str) -> DeleteRoleResult:
        """
        Delete a role and its user assignments.

        Raises:
            RoleNotFoundError: Unknown role id
        """
        role = await self._get_existing(role_id)
        await self.role_repository.delete(role_id)
        logger.info(f"Deleted role {role.name} ({role.id})")
        return DeleteRoleResult(role_id=role.id, name=role.name, deleted=True, deleted_at=self.clock())

    async def list_roles(self, query: Optional[ListRolesQuery] = None) -> ListRolesResult:
        """
        List roles with filtering, case-insensitive search and paging.

        Totals are computed after the search filter so pages are consistent.
        """
        query = query or ListRolesQuery()
        limit = min(query.limit or self.settings.default_page_size, self.settings.max_page_size)

        roles = await self.role_repository.find_all(
            RoleFilters(tenant_id=query.tenant_id, is_active=query.is_active)
        )

        if query.search:
            needle = query.search.lower()
            roles = [
                role for role in roles
                if needle in role.name.lower()
                or needle in role.display_name.lower()
                or needle in (role.description or "").lower()
            ]

        total = len(roles)
        offset = (query.page - 1) * limit
        page_items = roles[offset:offset + limit]

        return ListRolesResult(
            roles=[RoleListItem.from_role(role) for role in page_items],
            pagination=Pagination(
                page=query.page,
                limit=limit,
                total=total,
                total_pages=math.ceil(total / limit) if total else 0,
            ),
        )

    async def seed_default_roles(self, tenant_id: Optional[str] = None) -> List[RoleView]:
        """
        Create the predefined roles that do not exist yet in one scope.

        ``tenant_id=None`` seeds global roles; roles of the same name in a
        tenant do not count. Existing roles are returned unchanged, so
        seeding is idempotent.
        """
        seeded: List[RoleView] = []
        for definition in DEFAULT_ROLE_DEFINITIONS:
            existing = await self.role_repository.find_by_name_in_tenant(definition["name"], tenant_id)
            if existing is not None:
                logger.info(f"Role already exists: {existing.display_name}")
                seeded.append(RoleView.from_role(existing))
                continue

            view = await self.create_role(CreateRoleCommand(tenant_id=tenant_id, **definition))
            seeded.append(view)
        return seeded
