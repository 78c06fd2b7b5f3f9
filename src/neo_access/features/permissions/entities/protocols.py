"""Protocol interfaces for permission feature dependency injection.

Defines the persistence contract for roles. Implementations load roles with
``Role.reconstitute`` and save the output of ``Role.to_persistence`` by
upsert on ``id``.
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable, List, Optional

from .role import Role


@dataclass(frozen=True)
class RoleFilters:
    """Optional filters for role queries. None means "do not filter"."""
    tenant_id: Optional[str] = None
    is_active: Optional[bool] = None
    name: Optional[str] = None


@runtime_checkable
class RoleRepository(Protocol):
    """Protocol for role data access operations."""

    @abstractmethod
    async def find_by_id(self, role_id: str) -> Optional[Role]:
        """Find role by ID."""
        ...

    @abstractmethod
    async def find_by_name(self, name: str, tenant_id: Optional[str] = None) -> Optional[Role]:
        """Find role by name, optionally within a tenant."""
        ...

    @abstractmethod
    async def find_by_name_in_tenant(self, name: str, tenant_id: Optional[str]) -> Optional[Role]:
        """Find role by name in exactly one scope; None means global roles only."""
        ...

    @abstractmethod
    async def find_all(self, filters: Optional[RoleFilters] = None) -> List[Role]:
        """Find all roles matching filters, ordered by name."""
        ...

    @abstractmethod
    async def save(self, role: Role) -> None:
        """Create or update a role (upsert by id)."""
        ...

    @abstractmethod
    async def delete(self, role_id: str) -> None:
        """Delete a role and its user assignments."""
        ...

    @abstractmethod
    async def exists_by_name(
        self,
        name: str,
        tenant_id: Optional[str] = None,
        exclude_role_id: Optional[str] = None
    ) -> bool:
        """Check if a role name is taken, optionally ignoring one role."""
        ...

    @abstractmethod
    async def count(self, filters: Optional[RoleFilters] = None) -> int:
        """Count roles matching filters."""
        ...

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> List[Role]:
        """Get roles assigned to a user."""
        ...
