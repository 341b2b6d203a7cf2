"""Default configuration values for dottime."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dottime.config.schema import Preferences

# Used for the life view until the user enters a birth year
DEFAULT_BIRTH_YEAR = 1990
MIN_BIRTH_YEAR = 1900

DEFAULT_REMINDER_HOUR = 8
DEFAULT_REMINDER_MINUTE = 0

# Darkening layer drawn over a background image
DEFAULT_OVERLAY_OPACITY = 0.4

DEFAULT_PREFS_PATH = Path.home() / ".dottime" / "preferences.json"


def default_preferences() -> Preferences:
    """Preferences for a fresh install."""
    from dottime.config.schema import Preferences

    return Preferences()
