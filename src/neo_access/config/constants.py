"""Constants and enums for neo-access.

This module defines the closed vocabularies of the permission model
(resources and actions), the predefined role names and the default role
definitions used when seeding a fresh tenant or platform.
"""

from enum import Enum
from typing import Final, Dict, List, Any


PERMISSION_SEPARATOR: Final[str] = ":"


class PermissionResource(str, Enum):
    """Entity types a permission can apply to."""

    USER = "user"
    ROLE = "role"
    STUDENT = "student"
    TEACHER = "teacher"
    CLASS = "class"
    SUBJECT = "subject"
    ASSIGNMENT = "assignment"
    GRADE = "grade"
    ATTENDANCE = "attendance"
    SCHEDULE = "schedule"
    ANNOUNCEMENT = "announcement"
    REPORT = "report"
    SYSTEM = "system"

    @classmethod
    def has_value(cls, value: str) -> bool:
        return any(member.value == value for member in cls)


class PermissionAction(str, Enum):
    """Operation categories. MANAGE covers every action on its resource."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    MANAGE = "manage"

    @classmethod
    def has_value(cls, value: str) -> bool:
        return any(member.value == value for member in cls)


class PredefinedRole(str, Enum):
    """Role names seeded by default. Custom role names are plain strings."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"
    PARENT = "parent"


class MatchMode(str, Enum):
    """How a required permission is compared with a role's permissions."""

    EXACT = "exact"        # literal string membership (Role.has_permission)
    WILDCARD = "wildcard"  # manage/scope aware (Permission.matches)


class LogVerbosity(str, Enum):
    """Log verbosity modes."""

    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Warnings and above
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""

    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


class DefaultValues:
    """Default values used throughout the library."""

    DEFAULT_PAGE_SIZE: Final[int] = 20
    MAX_PAGE_SIZE: Final[int] = 100
    ENV_PREFIX: Final[str] = "NEO_ACCESS_"


def _manage_all(*resources: PermissionResource) -> List[str]:
    return [f"{resource.value}:{PermissionAction.MANAGE.value}" for resource in resources]


DEFAULT_ROLE_DEFINITIONS: Final[List[Dict[str, Any]]] = [
    {
        "name": PredefinedRole.SUPER_ADMIN.value,
        "display_name": "Super Administrator",
        "description": "Full system access with all permissions",
        "permissions": _manage_all(*PermissionResource),
    },
    {
        "name": PredefinedRole.ADMIN.value,
        "display_name": "Administrator",
        "description": "School-level administrative access",
        "permissions": [
            "user:read",
            "user:create",
            "user:update",
            "class:manage",
            "subject:manage",
            "assignment:manage",
            "grade:read",
            "attendance:manage",
            "schedule:manage",
            "announcement:manage",
            "report:read",
        ],
    },
    {
        "name": PredefinedRole.TEACHER.value,
        "display_name": "Teacher",
        "description": "Teacher access for class management",
        "permissions": [
            "class:read",
            "subject:read",
            "assignment:manage",
            "grade:manage",
            "attendance:manage",
            "student:read",
            "announcement:create",
        ],
    },
    {
        "name": PredefinedRole.STUDENT.value,
        "display_name": "Student",
        "description": "Student access to view materials and submit work",
        "permissions": [
            "class:read",
            "subject:read",
            "assignment:read",
            "grade:read",
            "attendance:read",
            "schedule:read",
            "announcement:read",
        ],
    },
    {
        "name": PredefinedRole.PARENT.value,
        "display_name": "Parent/Guardian",
        "description": "Parent access to view child progress",
        "permissions": [
            "student:read",
            "grade:read",
            "attendance:read",
            "report:read",
        ],
    },
]
