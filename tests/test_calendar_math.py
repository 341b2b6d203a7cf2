"""Tests for Gregorian calendar helpers."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from dottime.core.calendar_math import day_of_year, days_in_month, days_in_year, is_leap_year


class TestLeapYear:
    @pytest.mark.parametrize("year", [2000, 2004, 2024, 2400])
    def test_leap(self, year: int) -> None:
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [1900, 2023, 2100, 2200])
    def test_not_leap(self, year: int) -> None:
        assert not is_leap_year(year)

    def test_days_in_year(self) -> None:
        assert days_in_year(2024) == 366
        assert days_in_year(2023) == 365
        assert days_in_year(1900) == 365
        assert days_in_year(2000) == 366


class TestDaysInMonth:
    def test_february(self) -> None:
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2024, 2) == 29
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29

    def test_thirty_and_thirty_one(self) -> None:
        assert days_in_month(2023, 1) == 31
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 9) == 30
        assert days_in_month(2023, 12) == 31


class TestDayOfYear:
    def test_first_day(self) -> None:
        assert day_of_year(date(2023, 1, 1)) == 1

    def test_last_day(self) -> None:
        assert day_of_year(date(2023, 12, 31)) == 365
        assert day_of_year(date(2024, 12, 31)) == 366

    def test_after_leap_day(self) -> None:
        assert day_of_year(date(2024, 3, 1)) == 61
        assert day_of_year(date(2023, 3, 1)) == 60

    def test_accepts_datetime(self) -> None:
        assert day_of_year(datetime(2023, 2, 1, 23, 59)) == 32
