"""Serialization for preferences, time summaries, and dot cell export."""

from __future__ import annotations

import csv
import hashlib
import io
import json
from dataclasses import asdict
from datetime import date
from typing import Any, Sequence

from pydantic import ValidationError

from dottime.config.schema import Preferences
from dottime.core.timecalc import DotCell, TimeData
from dottime.utils.exceptions import ConfigError


def compute_preferences_hash(prefs: Preferences) -> str:
    """Compute a deterministic SHA-256 hash of the preferences.

    Uses canonical JSON (sorted keys, no whitespace) so the same
    logical preferences always produce the same hash.
    """
    canonical = json.dumps(prefs.model_dump(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


def dump_preferences(prefs: Preferences) -> str:
    """Serialize preferences to a JSON string."""
    return json.dumps(prefs.model_dump(), indent=2)


def parse_preferences(json_str: str) -> Preferences:
    """Deserialize preferences from a JSON string.

    Raises:
        ConfigError: If the JSON is malformed or fails validation.
    """
    try:
        data: dict[str, Any] = json.loads(json_str)
        return Preferences.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(f"Invalid preferences: {exc}") from exc


def time_data_summary(view_mode: str, now: date, time_data: TimeData) -> dict[str, Any]:
    """Flat dict describing a period summary at a reference date."""
    return {
        "view_mode": view_mode,
        "date": now.isoformat(),
        **asdict(time_data),
    }


def dump_time_data(view_mode: str, now: date, time_data: TimeData) -> str:
    """Serialize a period summary to JSON."""
    return json.dumps(time_data_summary(view_mode, now, time_data), indent=2)


def dump_dot_cells_csv(cells: Sequence[DotCell]) -> str:
    """Export dot cells as CSV.

    Returns:
        CSV string with ``index,is_passed,is_today`` columns; booleans are
        written as ``true``/``false``.
    """
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(["index", "is_passed", "is_today"])
    for cell in cells:
        writer.writerow(
            [
                cell.index,
                "true" if cell.is_passed else "false",
                "true" if cell.is_today else "false",
            ]
        )
    return output.getvalue()
