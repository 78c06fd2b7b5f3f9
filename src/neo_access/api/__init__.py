"""FastAPI integration for neo-access."""

from .dependencies import (
    get_current_roles,
    get_authorization_service,
    require_permission,
    require_any_permission,
    require_all_permissions,
)
from .exception_handlers import register_exception_handlers

__all__ = [
    "get_current_roles",
    "get_authorization_service",
    "require_permission",
    "require_any_permission",
    "require_all_permissions",
    "register_exception_handlers",
]
