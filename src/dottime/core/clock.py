"""Wall-clock access.

The calculator never reads the clock itself. Callers obtain ``now`` here and
pass it in, which keeps the calculation deterministic under test.
"""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dottime.utils.exceptions import ConfigError


def today(tz: str | None = None) -> date:
    """Return the current calendar date.

    Args:
        tz: IANA timezone name (e.g. ``"Europe/Rome"``). Uses the host's
            local timezone when None.

    Raises:
        ConfigError: If ``tz`` is not a known timezone.
    """
    if tz is None:
        return datetime.now().astimezone().date()
    try:
        zone = ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"Unknown timezone: {tz!r}") from exc
    return datetime.now(zone).date()


def parse_date(text: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` date."""
    try:
        return date.fromisoformat(text.strip())
    except ValueError as exc:
        raise ConfigError(f"Invalid date {text!r}, expected YYYY-MM-DD") from exc
