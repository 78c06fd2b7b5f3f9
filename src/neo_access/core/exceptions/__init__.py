"""Exceptions module for neo-access.

This module provides the complete exception hierarchy for neo-access,
organized by concern.
"""

from .base import NeoAccessError, create_error_response

from .domain import (
    # Configuration Errors
    ConfigurationError,

    # Validation Errors
    ValidationError,
    InvalidPermissionError,
    InvalidPermissionFormatError,
    InvalidPermissionResourceError,
    InvalidPermissionActionError,

    # Authorization Errors
    AuthorizationError,
    PermissionDeniedError,

    # Role Errors
    RoleError,
    RoleNotFoundError,
    DuplicateRoleError,
    InvalidRoleError,
)

from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    # Base
    "NeoAccessError",
    "get_http_status_code",
    "create_error_response",
    "HTTP_STATUS_MAP",

    # Configuration Errors
    "ConfigurationError",

    # Validation Errors
    "ValidationError",
    "InvalidPermissionError",
    "InvalidPermissionFormatError",
    "InvalidPermissionResourceError",
    "InvalidPermissionActionError",

    # Authorization Errors
    "AuthorizationError",
    "PermissionDeniedError",

    # Role Errors
    "RoleError",
    "RoleNotFoundError",
    "DuplicateRoleError",
    "InvalidRoleError",
]
