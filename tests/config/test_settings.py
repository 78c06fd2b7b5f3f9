"""Tests for environment-driven settings."""

import pytest

from neo_access.config.constants import MatchMode
from neo_access.config.constants import LogFormat, LogVerbosity
from neo_access.config.settings import AccessSettings, get_settings, load_settings
from neo_access.core.exceptions import ConfigurationError


class TestAccessSettings:
    """Test settings defaults, environment overrides and validation."""

    def test_defaults(self, settings):
        assert settings.default_page_size == 20
        assert settings.max_page_size == 100
        assert settings.authorization_match_mode is MatchMode.EXACT
        assert settings.skip_inactive_roles is True
        assert settings.log_verbosity is LogVerbosity.NORMAL
        assert settings.log_format is LogFormat.SIMPLE

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NEO_ACCESS_DEFAULT_PAGE_SIZE", "50")
        monkeypatch.setenv("NEO_ACCESS_AUTHORIZATION_MATCH_MODE", "WILDCARD")
        monkeypatch.setenv("NEO_ACCESS_SKIP_INACTIVE_ROLES", "false")
        monkeypatch.setenv("NEO_ACCESS_LOG_VERBOSITY", "debug")

        settings = AccessSettings(_env_file=None)

        assert settings.default_page_size == 50
        assert settings.authorization_match_mode is MatchMode.WILDCARD
        assert settings.skip_inactive_roles is False
        assert settings.log_verbosity is LogVerbosity.DEBUG

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_default_page_size_cannot_exceed_max(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(_env_file=None, default_page_size=200, max_page_size=100)

        assert exc_info.value.message == "Invalid neo-access settings"
        assert exc_info.value.details["errors"]

    def test_unknown_match_mode(self):
        with pytest.raises(ConfigurationError):
            load_settings(_env_file=None, authorization_match_mode="fuzzy")
