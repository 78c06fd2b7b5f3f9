"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import NeoAccessError
from .domain import (
    ConfigurationError,
    ValidationError,
    InvalidPermissionError,
    InvalidPermissionFormatError,
    InvalidPermissionResourceError,
    InvalidPermissionActionError,
    AuthorizationError,
    PermissionDeniedError,
    RoleError,
    RoleNotFoundError,
    DuplicateRoleError,
    InvalidRoleError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,
    InvalidPermissionError: 400,
    InvalidPermissionFormatError: 400,
    InvalidPermissionResourceError: 400,
    InvalidPermissionActionError: 400,
    InvalidRoleError: 400,

    # 403 Forbidden
    AuthorizationError: 403,
    PermissionDeniedError: 403,

    # 404 Not Found
    RoleNotFoundError: 404,

    # 409 Conflict
    DuplicateRoleError: 409,

    # 500 Internal Server Error
    RoleError: 500,
    ConfigurationError: 500,
    NeoAccessError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception.

    Walks the exception's MRO so subclasses inherit the status of their
    closest mapped ancestor.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code, 500 when nothing in the hierarchy is mapped
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
