"""Centralized logging configuration for neo-access.

Provides consistent, configurable logging with environment-based control
over verbosity and format.
"""

import logging
import logging.config
import os
from typing import Dict, Any, Optional

from .constants import LogFormat, LogVerbosity
from .settings import AccessSettings, get_settings


_VERBOSITY_LEVELS = {
    LogVerbosity.QUIET: "ERROR",
    LogVerbosity.NORMAL: "WARNING",
    LogVerbosity.VERBOSE: "INFO",
    LogVerbosity.DEBUG: "DEBUG",
}

_FORMATS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level. Unknown modes fall back to WARNING."""
    try:
        return _VERBOSITY_LEVELS[LogVerbosity(verbosity.upper())]
    except ValueError:
        return "WARNING"


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Modules that stay at WARNING unless running in DEBUG
    DEFAULT_QUIET_MODULES = [
        "neo_access.features.permissions.repositories",
    ]

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
    ]

    @classmethod
    def build_config(
        cls,
        verbosity: Optional[str] = None,
        log_format: Optional[str] = None,
        settings: Optional[AccessSettings] = None,
    ) -> Dict[str, Any]:
        """Build a ``dictConfig`` mapping from arguments or environment.

        Each value is taken from the argument, then the ``LOG_VERBOSITY`` /
        ``LOG_FORMAT`` env vars, then ``AccessSettings`` (``NEO_ACCESS_LOG_*``).

        Args:
            verbosity: Verbosity mode
            log_format: Format name
            settings: Settings fallback, defaults to ``get_settings()``

        Returns:
            Logging configuration dictionary
        """
        verbosity = verbosity or os.getenv("LOG_VERBOSITY")
        log_format = log_format or os.getenv("LOG_FORMAT")
        if verbosity is None or log_format is None:
            settings = settings or get_settings()
            verbosity = verbosity or settings.log_verbosity.value
            log_format = log_format or settings.log_format.value
        verbosity = verbosity.upper()
        log_format = log_format.lower()
        enable_auth_logging = os.getenv("ENABLE_AUTH_LOGGING", "false").lower() == "true"

        effective_log_level = get_log_level_from_verbosity(verbosity)
        try:
            format_string = _FORMATS[LogFormat(log_format)]
        except ValueError:
            format_string = _FORMATS[LogFormat.SIMPLE]

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {}
        }

        for module in cls.DEFAULT_QUIET_MODULES:
            logging_config["loggers"][module] = {
                "level": "WARNING" if effective_log_level != "DEBUG" else "DEBUG",
                "handlers": ["console"],
                "propagate": False,
            }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        # Authorization decisions are chatty; keep them quiet unless asked for
        if not enable_auth_logging:
            logging_config["loggers"]["neo_access.features.permissions.services"] = {
                "level": "WARNING" if effective_log_level != "DEBUG" else "INFO",
                "handlers": ["console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(
        cls,
        verbosity: Optional[str] = None,
        log_format: Optional[str] = None,
        settings: Optional[AccessSettings] = None,
    ) -> None:
        """Configure logging based on arguments or environment variables."""
        config = cls.build_config(verbosity, log_format, settings)
        logging.config.dictConfig(config)

        logger = logging.getLogger(__name__)
        if config["root"]["level"] == "DEBUG":
            logger.debug(f"Logging configured: level={config['root']['level']}")

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger for the given module name."""
        return logging.getLogger(name)


def setup_logging(
    verbosity: Optional[str] = None,
    log_format: Optional[str] = None,
    settings: Optional[AccessSettings] = None,
) -> None:
    """Setup logging configuration.

    This is the main entry point for configuring logging in an application
    that embeds neo-access. It should be called once at startup.
    """
    LoggingConfig.configure(verbosity, log_format, settings)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    return LoggingConfig.get_logger(name)
