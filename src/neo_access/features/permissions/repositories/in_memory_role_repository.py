"""In-memory RoleRepository implementation.

Keeps persisted role records and user-role assignments in process memory.
Records are copied on the way in and rebuilt with ``Role.reconstitute`` on
the way out, so callers never share state with the store.
"""

import copy
import logging
from typing import Dict, List, Optional, Set

from ....core.exceptions import RoleNotFoundError
from ..entities.protocols import RoleFilters, RoleRepository
from ..entities.role import Clock, Role, RoleRecord, role_from_record

logger = logging.getLogger(__name__)


class InMemoryRoleRepository(RoleRepository):
    """Role repository backed by dictionaries."""

    def __init__(self, clock: Optional[Clock] = None):
        """Initialize an empty store.

        Args:
            clock: Time source handed to reconstituted roles
        """
        self._records: Dict[str, RoleRecord] = {}
        self._assignments: Dict[str, Set[str]] = {}
        self._clock = clock

    def _to_domain(self, record: RoleRecord) -> Role:
        return role_from_record(copy.deepcopy(dict(record)), clock=self._clock)

    @staticmethod
    def _matches(record: RoleRecord, filters: Optional[RoleFilters]) -> bool:
        if filters is None:
            return True
        if filters.tenant_id and record["tenant_id"] != filters.tenant_id:
            return False
        if filters.is_active is not None and record["is_active"] != filters.is_active:
            return False
        if filters.name and record["name"] != filters.name:
            return False
        return True

    async def find_by_id(self, role_id: str) -> Optional[Role]:
        record = self._records.get(role_id)
        return self._to_domain(record) if record else None

    async def find_by_name(self, name: str, tenant_id: Optional[str] = None) -> Optional[Role]:
        for record in self._records.values():
            if record["name"] != name:
                continue
            if tenant_id and record["tenant_id"] != tenant_id:
                continue
            return self._to_domain(record)
        return None

    async def find_by_name_in_tenant(self, name: str, tenant_id: Optional[str]) -> Optional[Role]:
        for record in self._records.values():
            if record["name"] == name and record["tenant_id"] == tenant_id:
                return self._to_domain(record)
        return None

    async def find_all(self, filters: Optional[RoleFilters] = None) -> List[Role]:
        records = [r for r in self._records.values() if self._matches(r, filters)]
        records.sort(key=lambda r: r["name"])
        return [self._to_domain(r) for r in records]

    async def save(self, role: Role) -> None:
        """Upsert by id. Updates keep the stored name, tenant and created_at."""
        data = role.to_persistence()
        existing = self._records.get(data["id"])

        if existing is None:
            self._records[data["id"]] = copy.deepcopy(data)
            logger.debug(f"Inserted role {data['name']} ({data['id']})")
            return

        existing.update(
            display_name=data["display_name"],
            description=data["description"],
            permissions=list(data["permissions"]),
            is_active=data["is_active"],
            updated_at=data["updated_at"],
        )
        logger.debug(f"Updated role {existing['name']} ({data['id']})")

    async def delete(self, role_id: str) -> None:
        for role_ids in self._assignments.values():
            role_ids.discard(role_id)
        if self._records.pop(role_id, None) is not None:
            logger.debug(f"Deleted role {role_id}")

    async def exists_by_name(
        self,
        name: str,
        tenant_id: Optional[str] = None,
        exclude_role_id: Optional[str] = None
    ) -> bool:
        for record in self._records.values():
            if record["name"] != name:
                continue
            if tenant_id and record["tenant_id"] != tenant_id:
                continue
            if exclude_role_id and record["id"] == exclude_role_id:
                continue
            return True
        return False

    async def count(self, filters: Optional[RoleFilters] = None) -> int:
        return sum(1 for r in self._records.values() if self._matches(r, filters))

    async def find_by_user_id(self, user_id: str) -> List[Role]:
        role_ids = self._assignments.get(user_id, set())
        records = [self._records[role_id] for role_id in role_ids if role_id in self._records]
        records.sort(key=lambda r: r["name"])
        return [self._to_domain(r) for r in records]

    # Assignment management

    async def assign_role(self, user_id: str, role_id: str) -> None:
        """Assign a stored role to a user."""
        if role_id not in self._records:
            raise RoleNotFoundError(f"Role with ID {role_id} not found")
        self._assignments.setdefault(user_id, set()).add(role_id)

    async def unassign_role(self, user_id: str, role_id: str) -> None:
        self._assignments.get(user_id, set()).discard(role_id)
