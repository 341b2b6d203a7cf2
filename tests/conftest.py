"""Shared test fixtures."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from dottime.storage.store import JsonFilePreferenceStore, MemoryPreferenceStore


@pytest.fixture
def leap_feb_10() -> date:
    """2024-02-10: a leap-year February."""
    return date(2024, 2, 10)


@pytest.fixture
def memory_store() -> MemoryPreferenceStore:
    return MemoryPreferenceStore()


@pytest.fixture
def file_store(tmp_path: Path) -> JsonFilePreferenceStore:
    return JsonFilePreferenceStore(tmp_path / "prefs" / "preferences.json")
