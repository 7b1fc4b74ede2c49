"""Test that detection defaults come from Settings."""

import pytest
from pydantic import ValidationError

from itinerary_conflicts import config
from itinerary_conflicts.config import Settings, get_settings
from itinerary_conflicts.detector import resolve_options
from itinerary_conflicts.models import ConflictDetectionOptions


class TestSettings:
    """Settings defaults and environment overrides."""

    def test_settings_singleton(self):
        """Test that get_settings returns the same instance."""
        assert get_settings() is get_settings()
        assert isinstance(get_settings(), Settings)

    def test_default_thresholds(self, monkeypatch):
        """Test the documented default thresholds."""
        for name in ("MIN_BUFFER_MINUTES", "TIGHT_BUFFER_MINUTES", "LONG_GAP_MINUTES"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.min_buffer_minutes == 5
        assert settings.tight_buffer_minutes == 15
        assert settings.long_gap_minutes == 180
        assert settings.include_infos is True

    def test_environment_override(self, monkeypatch):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("LONG_GAP_MINUTES", "240")
        monkeypatch.setenv("INCLUDE_INFOS", "false")

        settings = Settings(_env_file=None)

        assert settings.long_gap_minutes == 240
        assert settings.include_infos is False

    def test_negative_threshold_rejected(self, monkeypatch):
        """Test that negative thresholds fail validation."""
        monkeypatch.setenv("TIGHT_BUFFER_MINUTES", "-1")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestResolveOptions:
    """Merging explicit options with configured defaults."""

    def test_none_uses_settings(self):
        """Test that no options means settings defaults."""
        settings = Settings(_env_file=None, long_gap_minutes=90)

        resolved = resolve_options(None, settings)

        assert resolved.long_gap_minutes == 90
        assert resolved.tight_buffer_minutes == settings.tight_buffer_minutes

    def test_explicit_fields_win(self):
        """Test that explicitly set model fields override settings."""
        settings = Settings(_env_file=None, long_gap_minutes=90, tight_buffer_minutes=30)

        resolved = resolve_options(ConflictDetectionOptions(tight_buffer_minutes=10), settings)

        assert resolved.tight_buffer_minutes == 10
        assert resolved.long_gap_minutes == 90

    def test_mapping_overrides(self):
        """Test that a partial mapping overrides only its keys."""
        settings = Settings(_env_file=None)

        resolved = resolve_options({"include_infos": False}, settings)

        assert resolved.include_infos is False
        assert resolved.min_buffer_minutes == settings.min_buffer_minutes

    def test_environment_flows_into_detection_defaults(self, monkeypatch):
        """Test that the cached settings feed resolve_options."""
        monkeypatch.setenv("LONG_GAP_MINUTES", "120")
        config._settings = None

        assert resolve_options().long_gap_minutes == 120

    def test_mapping_none_values_fall_back(self):
        """Test that keys mapped to None keep the configured defaults."""
        settings = Settings(_env_file=None)

        resolved = resolve_options(
            {"min_buffer_minutes": None, "include_infos": None, "long_gap_minutes": 60},
            settings,
        )

        assert resolved.min_buffer_minutes == settings.min_buffer_minutes
        assert resolved.include_infos is settings.include_infos
        assert resolved.long_gap_minutes == 60

    def test_camel_case_keys_accepted(self):
        """Test that camelCase option keys map onto their fields."""
        settings = Settings(_env_file=None)

        resolved = resolve_options(
            {"longGapMinutes": 60, "includeInfos": False}, settings
        )

        assert resolved.long_gap_minutes == 60
        assert resolved.include_infos is False

    def test_unknown_key_rejected(self):
        """Test that a misspelt option fails instead of being ignored."""
        with pytest.raises(ValidationError):
            resolve_options({"long_gap_mins": 60}, Settings(_env_file=None))
