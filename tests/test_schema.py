"""Tests for preference models."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from dottime.config.defaults import DEFAULT_BIRTH_YEAR, default_preferences
from dottime.config.schema import NotificationSettings, Preferences


class TestPreferences:
    def test_defaults(self) -> None:
        prefs = default_preferences()
        assert prefs.view_mode == "month"
        assert prefs.birth_year is None
        assert prefs.dot_color == "default"
        assert prefs.background == "none"
        assert prefs.font == "system"
        assert prefs.overlay_opacity == 0.4
        assert not prefs.notifications.enabled

    def test_effective_birth_year_default(self) -> None:
        assert Preferences().effective_birth_year == DEFAULT_BIRTH_YEAR == 1990

    def test_effective_birth_year_set(self) -> None:
        assert Preferences(birth_year=1985).effective_birth_year == 1985

    @pytest.mark.parametrize("year", [1899, date.today().year + 1])
    def test_birth_year_out_of_range(self, year: int) -> None:
        with pytest.raises(ValidationError, match="birth_year"):
            Preferences(birth_year=year)

    @pytest.mark.parametrize("year", [1900, date.today().year])
    def test_birth_year_bounds_inclusive(self, year: int) -> None:
        assert Preferences(birth_year=year).birth_year == year

    def test_unknown_view_mode(self) -> None:
        with pytest.raises(ValidationError):
            Preferences(view_mode="decade")

    def test_unknown_dot_color(self) -> None:
        with pytest.raises(ValidationError):
            Preferences(dot_color="neon")

    def test_extra_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            Preferences(theme="dark")

    def test_overlay_bounds(self) -> None:
        with pytest.raises(ValidationError):
            Preferences(overlay_opacity=1.5)


class TestNotificationSettings:
    def test_defaults(self) -> None:
        settings = NotificationSettings()
        assert (settings.enabled, settings.hour, settings.minute) == (False, 8, 0)

    @pytest.mark.parametrize("field,value", [("hour", 24), ("hour", -1), ("minute", 60)])
    def test_bounds(self, field: str, value: int) -> None:
        with pytest.raises(ValidationError):
            NotificationSettings(**{field: value})
