"""Tests for JSON and CSV serialization."""

from __future__ import annotations

import csv
import io
import json
from datetime import date

import pytest

from dottime.config.schema import NotificationSettings, Preferences
from dottime.core.timecalc import compute_time_data, generate_dot_cells
from dottime.io.serialize import (
    compute_preferences_hash,
    dump_dot_cells_csv,
    dump_preferences,
    dump_time_data,
    parse_preferences,
)
from dottime.utils.exceptions import ConfigError


class TestPreferencesJson:
    def test_round_trip(self) -> None:
        prefs = Preferences(
            view_mode="life",
            birth_year=1988,
            dot_color="mint",
            notifications=NotificationSettings(enabled=True, hour=21, minute=30),
        )
        assert parse_preferences(dump_preferences(prefs)) == prefs

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError):
            parse_preferences("{not json")

    def test_invalid_values(self) -> None:
        with pytest.raises(ConfigError):
            parse_preferences('{"view_mode": "decade"}')

    def test_hash_deterministic(self) -> None:
        h1 = compute_preferences_hash(Preferences())
        h2 = compute_preferences_hash(Preferences())
        assert h1 == h2
        assert len(h1) == 64

    def test_hash_changes(self) -> None:
        assert compute_preferences_hash(Preferences()) != compute_preferences_hash(
            Preferences(font="roboto")
        )


class TestTimeDataJson:
    def test_fields(self) -> None:
        now = date(2024, 2, 10)
        data = json.loads(dump_time_data("month", now, compute_time_data("month", 1990, now)))
        assert data == {
            "view_mode": "month",
            "date": "2024-02-10",
            "total_units": 29,
            "passed_units": 9,
            "remaining_units": 20,
            "label": "days left this month",
            "progress": pytest.approx(9 / 29),
        }


class TestDotCellsCsv:
    def test_header_and_rows(self) -> None:
        now = date(2024, 2, 3)
        cells = generate_dot_cells(compute_time_data("month", 1990, now), "month", now)
        rows = list(csv.reader(io.StringIO(dump_dot_cells_csv(cells))))
        assert rows[0] == ["index", "is_passed", "is_today"]
        assert len(rows) == 30
        assert rows[1] == ["0", "true", "false"]
        assert rows[3] == ["2", "false", "true"]
        assert rows[-1] == ["28", "false", "false"]

    def test_empty(self) -> None:
        assert dump_dot_cells_csv([]) == "index,is_passed,is_today\n"
