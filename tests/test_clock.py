"""Tests for clock access and date parsing."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from dottime.core.clock import parse_date, today
from dottime.utils.exceptions import ConfigError


class TestToday:
    def test_local(self) -> None:
        assert abs(today() - date.today()) <= timedelta(days=1)

    def test_named_zone(self) -> None:
        assert abs(today("UTC") - date.today()) <= timedelta(days=1)

    def test_unknown_zone(self) -> None:
        with pytest.raises(ConfigError, match="Unknown timezone"):
            today("Nowhere/Special")


class TestParseDate:
    def test_iso(self) -> None:
        assert parse_date(" 2024-02-29 ") == date(2024, 2, 29)

    @pytest.mark.parametrize("text", ["2023-02-29", "10/02/2024", ""])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(ConfigError):
            parse_date(text)
