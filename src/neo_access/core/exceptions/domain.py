"""Domain-specific exceptions for neo-access.

Permission parsing errors, authorization failures and role management
errors. Only permission parsing can fail inside the core model; the role
errors are raised by the management service.
"""

from typing import Optional

from .base import NeoAccessError


# Configuration Errors
class ConfigurationError(NeoAccessError):
    """Raised when there's a configuration issue."""
    pass


# Validation Errors
class ValidationError(NeoAccessError):
    """Base class for input validation errors."""
    pass


class InvalidPermissionError(ValidationError):
    """Base class for malformed permission strings."""

    def __init__(self, message: str, permission: Optional[str] = None):
        super().__init__(message, details={"permission": permission})
        self.permission = permission


class InvalidPermissionFormatError(InvalidPermissionError):
    """Raised when a permission string does not have 2 or 3 segments."""

    def __init__(self, permission: Optional[str] = None, message: Optional[str] = None):
        super().__init__(
            message or 'Invalid permission format. Expected "resource:action" or "resource:action:scope"',
            permission,
        )


class InvalidPermissionResourceError(InvalidPermissionError):
    """Raised when the resource segment is not a known resource."""

    def __init__(self, resource: str, permission: Optional[str] = None):
        super().__init__(f"Invalid permission resource: {resource}", permission)
        self.resource = resource


class InvalidPermissionActionError(InvalidPermissionError):
    """Raised when the action segment is not a known action."""

    def __init__(self, action: str, permission: Optional[str] = None):
        super().__init__(f"Invalid permission action: {action}", permission)
        self.action = action


# Authorization Errors
class AuthorizationError(NeoAccessError):
    """Base class for authorization-related errors."""
    pass


class PermissionDeniedError(AuthorizationError):
    """Raised when none of the actor's roles grants the required permission."""
    pass


# Role Errors
class RoleError(NeoAccessError):
    """Base class for role management errors."""
    pass


class RoleNotFoundError(RoleError):
    """Raised when a role cannot be found."""
    pass


class DuplicateRoleError(RoleError):
    """Raised when a role name is already taken within its tenant."""
    pass


class InvalidRoleError(RoleError):
    """Raised when role input is invalid."""
    pass
