"""Permission value object for neo-access permissions feature.

A permission is a ``(resource, action, scope?)`` triple with the canonical
string form ``resource:action`` or ``resource:action:scope``. Resource and
action are closed enumerations; scope is an opaque token narrowing the grant
to one instance or sub-context (for example a single class). No scope means
the grant is global for that resource and action.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from ....config.constants import (
    PERMISSION_SEPARATOR,
    PermissionAction,
    PermissionResource,
)
from ....core.exceptions import (
    InvalidPermissionActionError,
    InvalidPermissionError,
    InvalidPermissionFormatError,
    InvalidPermissionResourceError,
)


def _coerce_resource(value: Union[PermissionResource, str], raw: Optional[str] = None) -> PermissionResource:
    if isinstance(value, PermissionResource):
        return value
    if isinstance(value, str) and PermissionResource.has_value(value):
        return PermissionResource(value)
    raise InvalidPermissionResourceError(str(value), raw)


def _coerce_action(value: Union[PermissionAction, str], raw: Optional[str] = None) -> PermissionAction:
    if isinstance(value, PermissionAction):
        return value
    if isinstance(value, str) and PermissionAction.has_value(value):
        return PermissionAction(value)
    raise InvalidPermissionActionError(str(value), raw)


@dataclass(frozen=True)
class Permission:
    """
    Immutable permission with resource-action-scope structure.

    Examples:
        - user:create (create users anywhere)
        - grade:manage (every action on grades)
        - grade:update:class_123 (update grades of one class only)
    """
    resource: PermissionResource
    action: PermissionAction
    scope: Optional[str] = None

    def __post_init__(self):
        """Coerce components into the closed enumerations."""
        object.__setattr__(self, 'resource', _coerce_resource(self.resource))
        object.__setattr__(self, 'action', _coerce_action(self.action))

        if self.scope is not None:
            if not isinstance(self.scope, str):
                raise InvalidPermissionFormatError(message=f"Permission scope must be a string, got: {self.scope!r}")
            if PERMISSION_SEPARATOR in self.scope:
                raise InvalidPermissionFormatError(
                    message=f"Permission scope cannot contain '{PERMISSION_SEPARATOR}': {self.scope}"
                )
            # "user:read:" has an empty scope token; treat it as global
            if self.scope == "":
                object.__setattr__(self, 'scope', None)

    @classmethod
    def create(cls, permission_string: str) -> "Permission":
        """
        Parse a permission string.

        Args:
            permission_string: ``resource:action`` or ``resource:action:scope``

        Returns:
            Permission instance

        Raises:
            InvalidPermissionFormatError: Not 2 or 3 colon-separated parts
            InvalidPermissionResourceError: Unknown resource
            InvalidPermissionActionError: Unknown action
        """
        if not isinstance(permission_string, str):
            raise InvalidPermissionFormatError(repr(permission_string))

        parts = permission_string.split(PERMISSION_SEPARATOR)
        if len(parts) < 2 or len(parts) > 3:
            raise InvalidPermissionFormatError(permission_string)

        resource = _coerce_resource(parts[0], permission_string)
        action = _coerce_action(parts[1], permission_string)
        scope = parts[2] if len(parts) == 3 else None

        return cls(resource=resource, action=action, scope=scope)

    @classmethod
    def from_components(
        cls,
        resource: Union[PermissionResource, str],
        action: Union[PermissionAction, str],
        scope: Optional[str] = None,
    ) -> "Permission":
        """Create permission from already separated components."""
        return cls(resource=resource, action=action, scope=scope)

    @classmethod
    def is_valid(cls, permission_string: str) -> bool:
        """Check whether a string parses as a permission."""
        try:
            cls.create(permission_string)
        except InvalidPermissionError:
            return False
        return True

    @property
    def code(self) -> str:
        """Canonical string form."""
        if self.scope:
            return PERMISSION_SEPARATOR.join((self.resource.value, self.action.value, self.scope))
        return PERMISSION_SEPARATOR.join((self.resource.value, self.action.value))

    @property
    def is_wildcard(self) -> bool:
        """Check if this permission covers every action on its resource."""
        return self.action is PermissionAction.MANAGE

    @property
    def is_scoped(self) -> bool:
        return self.scope is not None

    def matches(self, required: Union["Permission", str]) -> bool:
        """
        Check if this (granted) permission satisfies a required permission.

        Rules:
        - Different resources never match
        - ``manage`` matches every action on the same resource
        - Otherwise the actions must be equal
        - A scoped requirement is met by a global grant or the same scope
        - An unscoped requirement is met by any grant with matching action

        Args:
            required: Permission (or permission string) being requested

        Returns:
            True if this permission grants the required one
        """
        if isinstance(required, str):
            required = Permission.create(required)

        if self.resource != required.resource:
            return False

        if self.action is PermissionAction.MANAGE:
            return True

        if self.action != required.action:
            return False

        if required.scope is not None:
            return self.scope is None or self.scope == required.scope

        return True

    def implies(self, other: Union["Permission", str]) -> bool:
        """Alias of :meth:`matches`."""
        return self.matches(other)

    def equals(self, other: "Permission") -> bool:
        """Structural equality; a missing scope differs from any scope."""
        return self == other

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Permission(code='{self.code}')"


def validate_permissions(permission_strings: Iterable[str]) -> List[Permission]:
    """
    Parse every string in a permission list.

    Used before assigning a list to a role; the role itself never
    revalidates what it stores.

    Raises:
        InvalidPermissionError: On the first malformed entry
    """
    return [Permission.create(permission_string) for permission_string in permission_strings]
