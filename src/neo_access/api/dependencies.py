"""
FastAPI authorization dependencies.

Request handlers declare the permission they need; the dependency resolves
the actor's roles and ORs the check across them. Role resolution belongs to
the host application: override :func:`get_current_roles` (and optionally
:func:`get_authorization_service`) through ``app.dependency_overrides``.
"""
import logging
from typing import Callable, List, Optional, Union

from fastapi import Depends, HTTPException, status

from ..config.constants import MatchMode
from ..features.permissions.entities.permission import Permission
from ..features.permissions.entities.role import Role
from ..features.permissions.services.authorization_service import AuthorizationService


logger = logging.getLogger(__name__)


def get_current_roles() -> List[Role]:
    """Get the roles of the current actor."""
    raise NotImplementedError("Configure role resolution via dependency_overrides")


def get_authorization_service() -> AuthorizationService:
    """Get authorization service with default settings."""
    return AuthorizationService()


def require_permission(permission: str, mode: Optional[Union[MatchMode, str]] = None) -> Callable:
    """
    Dependency factory for requiring a specific permission.

    ``mode`` picks exact string membership or manage/scope aware matching;
    None uses the configured default.

    Usage:
        @app.get("/grades", dependencies=[Depends(require_permission("grade:read"))])
    """
    Permission.create(permission)

    async def permission_dependency(
        roles: List[Role] = Depends(get_current_roles),
        authorization: AuthorizationService = Depends(get_authorization_service)
    ) -> List[Role]:
        result = authorization.check(roles, permission, mode)

        if not result.granted:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {permission}"
            )

        return roles

    return permission_dependency


def require_any_permission(permissions: List[str], mode: Optional[Union[MatchMode, str]] = None) -> Callable:
    """
    Dependency factory for requiring any of the specified permissions.

    Usage:
        @app.get("/reports", dependencies=[Depends(require_any_permission(["report:read", "report:manage"]))])
    """
    for permission in permissions:
        Permission.create(permission)

    async def permission_dependency(
        roles: List[Role] = Depends(get_current_roles),
        authorization: AuthorizationService = Depends(get_authorization_service)
    ) -> List[Role]:
        if not authorization.has_any_permission(roles, permissions, mode):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: requires any of {permissions}"
            )

        return roles

    return permission_dependency


def require_all_permissions(permissions: List[str], mode: Optional[Union[MatchMode, str]] = None) -> Callable:
    """
    Dependency factory for requiring all of the specified permissions.

    Usage:
        @app.delete("/roles/{id}", dependencies=[Depends(require_all_permissions(["role:delete", "user:update"]))])
    """
    for permission in permissions:
        Permission.create(permission)

    async def permission_dependency(
        roles: List[Role] = Depends(get_current_roles),
        authorization: AuthorizationService = Depends(get_authorization_service)
    ) -> List[Role]:
        if not authorization.has_all_permissions(roles, permissions, mode):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: requires all of {permissions}"
            )

        return roles

    return permission_dependency
