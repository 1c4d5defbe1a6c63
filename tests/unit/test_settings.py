"""
Tests for the Pydantic-based settings management system.
"""

import pytest

from uri_builder.settings import Settings, get_settings, reload_settings


class TestSettings:
    """
    Tests loading the library configuration from environment variables
    using the Pydantic settings system.
    """

    def setup_method(self):
        """Ensure settings are reloaded before each test."""
        reload_settings()

    def teardown_method(self):
        """Ensure settings are reloaded after each test to avoid side effects."""
        reload_settings()

    def test_default_settings_load_correctly(self):
        settings = get_settings()
        assert settings.omit_default_ports is True
        assert settings.query_separator == "&"

    def test_omit_default_ports_from_env(self, monkeypatch):
        """
        Tests that boolean fields are correctly parsed from string environment variables.
        """
        monkeypatch.setenv("OMIT_DEFAULT_PORTS", "off")

        reload_settings()
        settings = get_settings()

        assert settings.omit_default_ports is False

    def test_invalid_boolean_env_var_raises_error(self, monkeypatch):
        monkeypatch.setenv("OMIT_DEFAULT_PORTS", "sometimes")

        with pytest.raises(ValueError, match="Invalid boolean value"):
            reload_settings()
            get_settings()

    def test_query_separator_from_env(self, monkeypatch):
        monkeypatch.setenv("QUERY_SEPARATOR", ";")

        reload_settings()

        assert get_settings().query_separator == ";"

    @pytest.mark.parametrize("separator", ["=", "#", "/", "&&", ""])
    def test_invalid_query_separator(self, separator):
        with pytest.raises(ValueError):
            Settings(query_separator=separator)

    def test_settings_are_cached(self, monkeypatch):
        """
        Tests that get_settings() returns a cached instance unless reloaded.
        """
        settings1 = get_settings()
        assert settings1.query_separator == "&"

        # Change environment variable, but DO NOT reload settings
        monkeypatch.setenv("QUERY_SEPARATOR", ";")

        settings2 = get_settings()

        assert settings1 is settings2
        assert settings2.query_separator == "&"

        reload_settings()
        settings3 = get_settings()

        assert settings3 is not settings1
        assert settings3.query_separator == ";"
