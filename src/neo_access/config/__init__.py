"""Configuration module for neo-access.

Constants and enums of the permission model, environment-driven settings
and logging configuration.
"""

from .constants import (
    PERMISSION_SEPARATOR,
    PermissionResource,
    PermissionAction,
    PredefinedRole,
    MatchMode,
    LogVerbosity,
    LogFormat,
    DefaultValues,
    DEFAULT_ROLE_DEFINITIONS,
)

from .logging_config import (
    setup_logging,
    get_logger,
    LoggingConfig,
)

from .settings import AccessSettings, load_settings, get_settings

__all__ = [
    # Constants
    "PERMISSION_SEPARATOR",
    "PermissionResource",
    "PermissionAction",
    "PredefinedRole",
    "MatchMode",
    "DefaultValues",
    "DEFAULT_ROLE_DEFINITIONS",

    # Logging
    "setup_logging",
    "get_logger",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",

    # Settings
    "AccessSettings",
    "load_settings",
    "get_settings",
]
