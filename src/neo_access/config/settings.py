"""
Settings for neo-access.

Environment-driven configuration built on pydantic-settings. Every field can
be overridden through a ``NEO_ACCESS_`` prefixed environment variable or a
``.env`` file.
"""
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError
from .constants import DefaultValues, LogFormat, LogVerbosity, MatchMode


class AccessSettings(BaseSettings):
    """Access-control settings shared by services and API dependencies."""

    model_config = SettingsConfigDict(
        env_prefix=DefaultValues.ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Pagination Configuration
    default_page_size: int = Field(default=DefaultValues.DEFAULT_PAGE_SIZE, ge=1)
    max_page_size: int = Field(default=DefaultValues.MAX_PAGE_SIZE, ge=1)

    # Authorization Configuration
    authorization_match_mode: MatchMode = MatchMode.EXACT
    skip_inactive_roles: bool = True

    # Logging Configuration
    log_verbosity: LogVerbosity = LogVerbosity.NORMAL
    log_format: LogFormat = LogFormat.SIMPLE

    @field_validator("authorization_match_mode", "log_format", mode="before")
    @classmethod
    def lowercase_value(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_verbosity", mode="before")
    @classmethod
    def uppercase_value(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_page_sizes(self) -> "AccessSettings":
        """Default page size cannot exceed the maximum."""
        if self.default_page_size > self.max_page_size:
            raise ValueError(
                f"default_page_size ({self.default_page_size}) cannot exceed "
                f"max_page_size ({self.max_page_size})"
            )
        return self


def load_settings(**overrides) -> AccessSettings:
    """Build settings from the environment plus explicit overrides.

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return AccessSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid neo-access settings",
            details={"errors": e.errors(include_url=False)},
        ) from e


@lru_cache()
def get_settings() -> AccessSettings:
    """Get cached settings instance."""
    return load_settings()
