"""Permission services package."""

from .authorization_service import AuthorizationResult, AuthorizationService
from .role_service import RoleService

__all__ = [
    "AuthorizationResult",
    "AuthorizationService",
    "RoleService",
]
