"""Time partition calculation: turn a date and a view mode into dot cells."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal

from dottime.core.calendar_math import day_of_year, days_in_month, days_in_year
from dottime.utils.exceptions import UnsupportedViewModeError

ViewMode = Literal["month", "year", "life"]

VIEW_MODES: tuple[ViewMode, ...] = ("month", "year", "life")

LIFE_EXPECTANCY_YEARS = 85

MONTH_LABEL = "days left this month"
YEAR_LABEL = "days left this year"
LIFE_LABEL = "years remaining"


@dataclass(frozen=True, slots=True)
class TimeData:
    """Summary of one period at a reference date.

    Attributes:
        total_units: Size of the period in days (month/year) or years (life).
        passed_units: Units strictly before the reference date.
        remaining_units: Units left, including the current one.
        label: Human-readable description of ``remaining_units``.
        progress: Fraction of the period elapsed, in [0, 1].
    """

    total_units: int
    passed_units: int
    remaining_units: int
    label: str
    progress: float

    @classmethod
    def empty(cls) -> TimeData:
        """Zero-valued summary used for unrecognised view modes."""
        return cls(total_units=0, passed_units=0, remaining_units=0, label="", progress=0.0)

    @classmethod
    def from_counts(cls, total_units: int, passed_units: int, label: str) -> TimeData:
        """Build a summary, deriving remaining units and progress."""
        return cls(
            total_units=total_units,
            passed_units=passed_units,
            remaining_units=max(0, total_units - passed_units),
            label=label,
            progress=passed_units / total_units if total_units > 0 else 0.0,
        )


@dataclass(frozen=True, slots=True)
class DotCell:
    """One unit of the grid."""

    index: int
    is_passed: bool
    is_today: bool


def compute_time_data(
    view_mode: str,
    birth_year: int,
    now: date,
    *,
    strict: bool = False,
) -> TimeData:
    """Compute the period summary for ``view_mode`` at ``now``.

    Args:
        view_mode: ``"month"``, ``"year"`` or ``"life"``.
        birth_year: Only consulted for ``"life"``. Callers supply their own
            default when none is stored.
        now: Reference date. A ``datetime`` is accepted; its calendar fields
            are used as-is, in whatever timezone it carries.
        strict: Raise on an unrecognised view mode instead of returning the
            zero summary.

    Returns:
        TimeData for the period containing ``now``.

    Raises:
        UnsupportedViewModeError: If ``strict`` and the mode is unknown.
    """
    if view_mode == "month":
        total = days_in_month(now.year, now.month)
        return TimeData.from_counts(total, now.day - 1, MONTH_LABEL)

    if view_mode == "year":
        total = days_in_year(now.year)
        return TimeData.from_counts(total, day_of_year(now) - 1, YEAR_LABEL)

    if view_mode == "life":
        # Calendar-year subtraction only; birth month/day are not known.
        age_in_years = now.year - birth_year
        passed = min(age_in_years, LIFE_EXPECTANCY_YEARS)
        return TimeData.from_counts(LIFE_EXPECTANCY_YEARS, passed, LIFE_LABEL)

    if strict:
        raise UnsupportedViewModeError(view_mode)
    return TimeData.empty()


def current_unit_index(view_mode: str, now: date) -> int | None:
    """Index of the cell holding ``now``, or None when no cell is "today".

    Life mode visualises whole years, so it has no today cell.
    """
    if view_mode == "month":
        return now.day - 1
    if view_mode == "year":
        return day_of_year(now) - 1
    return None


def generate_dot_cells(time_data: TimeData, view_mode: str, now: date) -> list[DotCell]:
    """Expand a summary into one DotCell per unit, in index order.

    The summary is trusted as given; only the today index is derived
    from ``now``.
    """
    today_index = current_unit_index(view_mode, now)
    return [
        DotCell(
            index=i,
            is_passed=i < time_data.passed_units,
            is_today=i == today_index,
        )
        for i in range(time_data.total_units)
    ]
