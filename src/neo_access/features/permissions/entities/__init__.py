"""Permission entities package.

Domain value objects, the role aggregate and persistence protocols.
"""

from .permission import Permission, validate_permissions
from .role import Role, RoleRecord, UNSET, role_from_record
from .protocols import RoleFilters, RoleRepository

__all__ = [
    # Domain entities
    "Permission",
    "Role",
    "RoleRecord",
    "UNSET",
    "validate_permissions",
    "role_from_record",

    # Protocols
    "RoleFilters",
    "RoleRepository",
]
