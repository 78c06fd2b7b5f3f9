"""Authorization service for request-time access decisions.

An actor is authorized for a permission when at least one of its roles
satisfies it (logical OR across roles, first match wins). Two comparison
modes exist and are never mixed implicitly:

- ``MatchMode.EXACT`` uses ``Role.has_permission`` (literal string membership)
- ``MatchMode.WILDCARD`` uses ``Role.grants`` (``manage`` and scope rules)
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from ....config.constants import MatchMode
from ....config.settings import AccessSettings, get_settings
from ....core.exceptions import ConfigurationError, PermissionDeniedError
from ..entities.permission import Permission
from ..entities.protocols import RoleRepository
from ..entities.role import Role


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthorizationResult:
    """Outcome of a single permission check."""
    required: str
    granted: bool
    mode: MatchMode
    matched_role_id: Optional[str] = None
    matched_role_name: Optional[str] = None

    def __bool__(self) -> bool:
        return self.granted


class AuthorizationService:
    """Evaluates permission requirements against an actor's roles."""

    def __init__(
        self,
        role_repository: Optional[RoleRepository] = None,
        settings: Optional[AccessSettings] = None
    ):
        """Initialize service.

        Args:
            role_repository: Used to resolve a user's roles for the
                ``user_*`` checks; the role-set checks work without it
            settings: Defaults for match mode and inactive role handling
        """
        settings = settings or get_settings()
        self.role_repository = role_repository
        self.default_mode = settings.authorization_match_mode
        self.skip_inactive_roles = settings.skip_inactive_roles

    def _resolve_mode(self, mode: Optional[Union[MatchMode, str]]) -> MatchMode:
        return MatchMode(mode) if mode is not None else self.default_mode

    @staticmethod
    def _role_satisfies(role: Role, required: str, mode: MatchMode) -> bool:
        if mode is MatchMode.WILDCARD:
            return role.grants(required)
        return role.has_permission(required)

    # Role-set checks

    def check(
        self,
        roles: Iterable[Role],
        required: str,
        mode: Optional[Union[MatchMode, str]] = None
    ) -> AuthorizationResult:
        """
        Check one required permission against a set of roles.

        Inactive roles are ignored unless ``skip_inactive_roles`` is off.

        Raises:
            InvalidPermissionError: In wildcard mode, if ``required`` is malformed
        """
        mode = self._resolve_mode(mode)
        if mode is MatchMode.WILDCARD:
            required = Permission.create(required).code

        for role in roles:
            if self.skip_inactive_roles and not role.is_active:
                logger.debug(f"Ignoring inactive role {role.name} for {required}")
                continue
            if self._role_satisfies(role, required, mode):
                return AuthorizationResult(
                    required=required,
                    granted=True,
                    mode=mode,
                    matched_role_id=role.id,
                    matched_role_name=role.name,
                )

        logger.debug(f"No role grants {required} ({mode.value} match)")
        return AuthorizationResult(required=required, granted=False, mode=mode)

    def is_authorized(
        self,
        roles: Iterable[Role],
        required: str,
        mode: Optional[Union[MatchMode, str]] = None
    ) -> bool:
        return self.check(roles, required, mode).granted

    def has_any_permission(
        self,
        roles: Iterable[Role],
        required: Iterable[str],
        mode: Optional[Union[MatchMode, str]] = None
    ) -> bool:
        """True if any requirement is granted by some role. Empty is False."""
        roles = list(roles)
        return any(self.is_authorized(roles, permission, mode) for permission in required)

    def has_all_permissions(
        self,
        roles: Iterable[Role],
        required: Iterable[str],
        mode: Optional[Union[MatchMode, str]] = None
    ) -> bool:
        """True if every requirement is granted by some role. Empty is True."""
        roles = list(roles)
        return all(self.is_authorized(roles, permission, mode) for permission in required)

    def require(
        self,
        roles: Iterable[Role],
        required: str,
        mode: Optional[Union[MatchMode, str]] = None
    ) -> AuthorizationResult:
        """
        Check a permission and raise when it is not granted.

        Raises:
            PermissionDeniedError: If no role grants ``required``
        """
        result = self.check(roles, required, mode)
        if not result.granted:
            raise PermissionDeniedError(
                f"Permission denied: {required}",
                details={"required": required, "mode": result.mode.value},
            )
        return result

    # User checks

    async def get_user_roles(self, user_id: str, tenant_id: Optional[str] = None) -> List[Role]:
        """
        Resolve the roles that apply to a user in a context.

        Global roles apply everywhere; tenant roles only apply to their
        own tenant.
        """
        if self.role_repository is None:
            raise ConfigurationError("AuthorizationService needs a role repository for user checks")

        roles = await self.role_repository.find_by_user_id(user_id)
        return [role for role in roles if role.tenant_id is None or role.tenant_id == tenant_id]

    async def check_user(
        self,
        user_id: str,
        required: str,
        tenant_id: Optional[str] = None,
        mode: Optional[Union[MatchMode, str]] = None
    ) -> AuthorizationResult:
        roles = await self.get_user_roles(user_id, tenant_id)
        result = self.check(roles, required, mode)
        logger.info(
            f"Authorization {'granted' if result.granted else 'denied'} for user {user_id}: "
            f"{required} (tenant={tenant_id}, role={result.matched_role_name})"
        )
        return result

    async def user_has_permission(
        self,
        user_id: str,
        required: str,
        tenant_id: Optional[str] = None,
        mode: Optional[Union[MatchMode, str]] = None
    ) -> bool:
        return (await self.check_user(user_id, required, tenant_id, mode)).granted
