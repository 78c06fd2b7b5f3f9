"""Role aggregate for neo-access permissions feature.

A role owns an ordered, duplicate-free list of permission strings and answers
authorization queries against it. Roles may be global (no tenant) or belong
to a single tenant, and can be deactivated without losing their permissions.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, TypedDict, Union

from ....core.exceptions import InvalidPermissionError
from ....utils import generate_uuid_v7, utc_now
from .permission import Permission


logger = logging.getLogger(__name__)


IdFactory = Callable[[], str]
Clock = Callable[[], datetime]


class _Unset:
    """Marker for arguments that were not supplied."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


class RoleRecord(TypedDict):
    """Persisted shape of a role."""
    id: str
    name: str
    display_name: str
    description: Optional[str]
    permissions: List[str]
    tenant_id: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime


def _dedupe(permissions: Iterable[str]) -> List[str]:
    """Drop repeated entries, keeping the first occurrence order."""
    return list(dict.fromkeys(permissions))


def _as_utc(value: datetime) -> datetime:
    # Stored timestamps may come back naive; they are UTC
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _clean_description(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    return description.strip() or None


@dataclass(eq=False)
class Role:
    """
    Role aggregate with a permission set and lifecycle timestamps.

    Identity is ``id``. Build new roles with :meth:`create` and rebuild
    stored ones with :meth:`reconstitute`. Permissions are exposed as an
    immutable snapshot; change them through the mutators only.
    """
    id: str
    name: str
    display_name: str
    description: Optional[str]
    _permissions: List[str]
    tenant_id: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime
    _clock: Clock = field(default=utc_now, repr=False)

    @classmethod
    def create(
        cls,
        name: str,
        display_name: str,
        description: Optional[str] = None,
        permissions: Optional[Iterable[str]] = None,
        tenant_id: Optional[str] = None,
        *,
        id_factory: Optional[IdFactory] = None,
        clock: Optional[Clock] = None,
    ) -> "Role":
        """
        Create a new active role.

        Args:
            name: Unique (per tenant) role key, predefined or custom
            display_name: Human readable label, trimmed
            description: Optional free text, trimmed; blank becomes None
            permissions: Initial permission strings, deduplicated in order
            tenant_id: Owning tenant, None for a global role
            id_factory: Id generator, defaults to UUIDv7
            clock: Time source, defaults to UTC now

        Returns:
            New Role with created_at == updated_at
        """
        clock = clock or utc_now
        now = clock()

        return cls(
            id=(id_factory or generate_uuid_v7)(),
            name=name,
            display_name=display_name.strip(),
            description=_clean_description(description),
            _permissions=_dedupe(permissions or []),
            tenant_id=tenant_id or None,
            is_active=True,
            created_at=now,
            updated_at=now,
            _clock=clock,
        )

    @classmethod
    def reconstitute(
        cls,
        id: str,
        name: str,
        display_name: str,
        description: Optional[str],
        permissions: List[str],
        tenant_id: Optional[str],
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
        *,
        clock: Optional[Clock] = None,
    ) -> "Role":
        """Rebuild a role from persisted fields verbatim, without validation."""
        return cls(
            id=id,
            name=name,
            display_name=display_name,
            description=description,
            _permissions=list(permissions),
            tenant_id=tenant_id,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
            _clock=clock or utc_now,
        )

    @property
    def permissions(self) -> Tuple[str, ...]:
        """Snapshot of the permission strings in insertion order."""
        return tuple(self._permissions)

    @property
    def is_global(self) -> bool:
        """Check if role is shared across tenants."""
        return self.tenant_id is None

    # Mutators

    def update_details(self, display_name: Optional[str] = UNSET, description: Optional[str] = UNSET) -> None:
        """
        Update display name and/or description.

        Omitted arguments are left untouched. A blank display name is
        ignored rather than clearing the label; an explicit None or blank
        description clears it.
        """
        if display_name is not UNSET and display_name and display_name.strip():
            self.display_name = display_name.strip()
        if description is not UNSET:
            self.description = _clean_description(description)
        self._touch()

    def add_permission(self, permission: str) -> None:
        """Append a permission string unless it is already present."""
        if permission in self._permissions:
            return
        self._permissions.append(permission)
        self._touch()

    def remove_permission(self, permission: str) -> None:
        """Remove a permission string; absent entries are ignored."""
        if permission not in self._permissions:
            return
        self._permissions.remove(permission)
        self._touch()

    def set_permissions(self, permissions: Iterable[str]) -> None:
        """Replace every permission with a deduplicated copy of the list."""
        self._permissions = _dedupe(permissions)
        self._touch()

    def activate(self) -> None:
        self.is_active = True
        self._touch()

    def deactivate(self) -> None:
        self.is_active = False
        self._touch()

    # Queries

    def has_permission(self, permission: str) -> bool:
        """
        Check exact membership of a permission string.

        This is a literal comparison: ``grade:manage`` does not satisfy
        ``grade:read`` here. Use :meth:`grants` for manage/scope aware checks.
        """
        return permission in self._permissions

    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        """True if at least one entry is held exactly. Empty input is False."""
        return any(permission in self._permissions for permission in permissions)

    def has_all_permissions(self, permissions: Iterable[str]) -> bool:
        """True if every entry is held exactly. Empty input is True."""
        return all(permission in self._permissions for permission in permissions)

    def grants(self, required: Union[Permission, str]) -> bool:
        """
        Check if any stored permission matches ``required`` via
        :meth:`Permission.matches` (``manage`` wildcard and scope rules).

        Args:
            required: Permission or permission string

        Raises:
            InvalidPermissionError: If ``required`` is a malformed string
        """
        if isinstance(required, str):
            required = Permission.create(required)

        for held in self._permissions:
            try:
                granted = Permission.create(held)
            except InvalidPermissionError as e:
                logger.warning(f"Skipping invalid permission '{held}' on role {self.name} ({self.id}): {e.message}")
                continue
            if granted.matches(required):
                return True
        return False

    def to_persistence(self) -> RoleRecord:
        """Convert to a plain record for repositories."""
        return RoleRecord(
            id=self.id,
            name=self.name,
            display_name=self.display_name,
            description=self.description,
            permissions=list(self._permissions),
            tenant_id=self.tenant_id,
            is_active=self.is_active,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def _touch(self) -> None:
        # updated_at never moves behind the stored value
        now = self._clock()
        if _as_utc(now) >= _as_utc(self.updated_at):
            self.updated_at = now

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.display_name or self.name

    def __repr__(self) -> str:
        context = f"tenant:{self.tenant_id}" if self.tenant_id else "global"
        status = "active" if self.is_active else "inactive"
        return f"Role(name='{self.name}', {context}, {status}, permissions={len(self._permissions)})"


def role_from_record(record: Dict[str, Any], clock: Optional[Clock] = None) -> Role:
    """Rebuild a role from a persistence record."""
    return Role.reconstitute(**record, clock=clock)
