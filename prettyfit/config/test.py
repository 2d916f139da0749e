"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    get_default_indent,
    get_default_width,
    get_environment,
    get_environment_info,
    is_choice_verification_enabled,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("PRETTYFIT_WIDTH", raising=False)
        assert get_environment(EnvVar.WIDTH) == 80

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("PRETTYFIT_WIDTH", "100")
        assert get_environment(EnvVar.WIDTH, override=40) == 40

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("PRETTYFIT_WIDTH", "120")
        result = get_environment(EnvVar.WIDTH)
        assert result == 120
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_falls_back_to_default(self, monkeypatch):
        """Unparseable integers fall back to the default."""
        monkeypatch.setenv("PRETTYFIT_INDENT", "wide")
        assert get_environment(EnvVar.INDENT) == 2

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("PRETTYFIT_VERIFY_CHOICES", value)
            assert get_environment(EnvVar.VERIFY_CHOICES) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("PRETTYFIT_VERIFY_CHOICES", value)
            assert get_environment(EnvVar.VERIFY_CHOICES) is False

    @pytest.mark.unit
    def test_unrecognized_bool_uses_default(self, monkeypatch):
        """Unrecognized boolean strings fall back to the default."""
        monkeypatch.setenv("PRETTYFIT_VERIFY_CHOICES", "maybe")
        assert get_environment(EnvVar.VERIFY_CHOICES) is False

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("PRETTYFIT_LOG_LEVEL", "DEBUG")
        assert get_environment(EnvVar.LOG_LEVEL) == "DEBUG"


# =============================================================================
# Tests for metadata and convenience helpers
# =============================================================================


class TestEnvironmentInfo:
    """Tests for environment metadata helpers."""

    @pytest.mark.unit
    def test_info_returns_env_config(self):
        """get_environment_info returns the EnvConfig."""
        info = get_environment_info(EnvVar.WIDTH)
        assert isinstance(info, EnvConfig)
        assert info.name == "PRETTYFIT_WIDTH"
        assert info.var_type is int

    @pytest.mark.unit
    def test_all_vars_are_prefixed(self):
        """Every variable lives in the PRETTYFIT_ namespace."""
        for var in EnvVar:
            assert var.value.name.startswith("PRETTYFIT_")
            assert var.value.description

    @pytest.mark.unit
    def test_list_by_category(self):
        """Variables can be filtered by category."""
        layout_vars = list_environment_variables("layout")
        assert set(layout_vars) == {EnvVar.WIDTH, EnvVar.INDENT}
        assert len(list_environment_variables()) == len(EnvVar)
        assert list_environment_variables("missing") == []


class TestConvenienceFunctions:
    """Tests for convenience accessors."""

    @pytest.mark.unit
    def test_default_width(self, monkeypatch):
        """get_default_width honours override and environment."""
        monkeypatch.setenv("PRETTYFIT_WIDTH", "60")
        assert get_default_width() == 60
        assert get_default_width(30) == 30

    @pytest.mark.unit
    def test_default_indent(self, monkeypatch):
        """get_default_indent reads PRETTYFIT_INDENT."""
        monkeypatch.setenv("PRETTYFIT_INDENT", "4")
        assert get_default_indent() == 4

    @pytest.mark.unit
    def test_choice_verification_flag(self, monkeypatch):
        """Verification is disabled unless asked for."""
        monkeypatch.delenv("PRETTYFIT_VERIFY_CHOICES", raising=False)
        assert is_choice_verification_enabled() is False
        monkeypatch.setenv("PRETTYFIT_VERIFY_CHOICES", "1")
        assert is_choice_verification_enabled() is True
