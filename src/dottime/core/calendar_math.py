"""Gregorian calendar helpers."""

from __future__ import annotations

import calendar
from datetime import date


def is_leap_year(year: int) -> bool:
    """Divisible by 4, except centuries not divisible by 400."""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month (1-12) of ``year``."""
    return calendar.monthrange(year, month)[1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def day_of_year(d: date) -> int:
    """1-based ordinal day within the year (Jan 1 is day 1)."""
    return d.toordinal() - date(d.year, 1, 1).toordinal() + 1
