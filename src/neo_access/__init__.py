"""Neo-Access - Role and permission core for NeoMultiTenant services.

Parses and matches permission strings, manages role aggregates and answers
authorization questions for an actor's resolved roles.
"""

from .__version__ import __version__

from .config import (
    PermissionResource,
    PermissionAction,
    PredefinedRole,
    MatchMode,
    AccessSettings,
    get_settings,
    setup_logging,
)

from .core.exceptions import (
    NeoAccessError,
    ValidationError,
    InvalidPermissionError,
    InvalidPermissionFormatError,
    InvalidPermissionResourceError,
    InvalidPermissionActionError,
    AuthorizationError,
    PermissionDeniedError,
    RoleNotFoundError,
    DuplicateRoleError,
    InvalidRoleError,
    get_http_status_code,
    create_error_response,
)

from .features.permissions import (
    Permission,
    Role,
    RoleFilters,
    RoleRepository,
    InMemoryRoleRepository,
    AuthorizationService,
    AuthorizationResult,
    RoleService,
    validate_permissions,
)

__all__ = [
    "__version__",

    # Configuration
    "PermissionResource",
    "PermissionAction",
    "PredefinedRole",
    "MatchMode",
    "AccessSettings",
    "get_settings",
    "setup_logging",

    # Exceptions
    "NeoAccessError",
    "ValidationError",
    "InvalidPermissionError",
    "InvalidPermissionFormatError",
    "InvalidPermissionResourceError",
    "InvalidPermissionActionError",
    "AuthorizationError",
    "PermissionDeniedError",
    "RoleNotFoundError",
    "DuplicateRoleError",
    "InvalidRoleError",
    "get_http_status_code",
    "create_error_response",

    # Permissions feature
    "Permission",
    "Role",
    "RoleFilters",
    "RoleRepository",
    "InMemoryRoleRepository",
    "AuthorizationService",
    "AuthorizationResult",
    "RoleService",
    "validate_permissions",
]
