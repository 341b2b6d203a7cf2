"""Local key-value preference storage.

Values are stored as strings under ``@dottime_*`` keys. The typed helpers
never raise on storage trouble: they log a warning and hand back the
caller's default, so a broken preference file cannot take the app down.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from dottime.config.schema import NotificationSettings, Preferences
from dottime.utils.exceptions import StorageError

logger = logging.getLogger(__name__)

KEY_PREFIX = "@dottime_"
BIRTH_YEAR_KEY = f"{KEY_PREFIX}birth_year"
VIEW_TYPE_KEY = f"{KEY_PREFIX}view_type"
DOT_COLOR_KEY = f"{KEY_PREFIX}dot_color"
BACKGROUND_KEY = f"{KEY_PREFIX}background"
CUSTOM_BACKGROUND_KEY = f"{KEY_PREFIX}custom_background"
OVERLAY_OPACITY_KEY = f"{KEY_PREFIX}overlay_opacity"
FONT_KEY = f"{KEY_PREFIX}font"
ONBOARDING_KEY = f"{KEY_PREFIX}onboarding_complete"
NOTIFICATION_ENABLED_KEY = f"{KEY_PREFIX}notifications_enabled"
NOTIFICATION_TIME_KEY = f"{KEY_PREFIX}notification_time"


class PreferenceStore(Protocol):
    """String-keyed storage backend."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key is missing."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``."""
        ...

    def remove_item(self, key: str) -> None:
        """Delete ``key`` if present."""
        ...


class MemoryPreferenceStore:
    """In-process store, mostly for tests and the Streamlit session."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class JsonFilePreferenceStore:
    """Store backed by a single JSON object on disk.

    A missing file reads as empty. Writes go to a temp file in the same
    directory and are moved into place.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Cannot read preferences from {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Preference file {self._path} does not hold a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def _write(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        except OSError as exc:
            raise StorageError(f"Cannot write preferences to {self._path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
        except (OSError, TypeError, ValueError) as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Cannot write preferences to {self._path}: {exc}") from exc

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)


def _safe_get(store: PreferenceStore, key: str) -> str | None:
    try:
        return store.get_item(key)
    except StorageError as exc:
        logger.warning("Failed to read %s: %s", key, exc)
        return None


def _safe_set(store: PreferenceStore, key: str, value: str) -> bool:
    try:
        store.set_item(key, value)
    except StorageError as exc:
        logger.warning("Failed to save %s: %s", key, exc)
        return False
    return True


def _safe_remove(store: PreferenceStore, key: str) -> bool:
    try:
        store.remove_item(key)
    except StorageError as exc:
        logger.warning("Failed to clear %s: %s", key, exc)
        return False
    return True


def get_birth_year(store: PreferenceStore, default: int | None = None) -> int | None:
    """Stored birth year, or ``default`` when missing or unparsable."""
    raw = _safe_get(store, BIRTH_YEAR_KEY)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer birth year %r", raw)
        return default


def save_birth_year(store: PreferenceStore, year: int) -> bool:
    return _safe_set(store, BIRTH_YEAR_KEY, str(year))


def get_view_type(store: PreferenceStore, default: str | None = None) -> str | None:
    """Stored view mode, or ``default`` when missing."""
    return _safe_get(store, VIEW_TYPE_KEY) or default


def save_view_type(store: PreferenceStore, view_type: str) -> bool:
    return _safe_set(store, VIEW_TYPE_KEY, view_type)


def is_onboarding_complete(store: PreferenceStore) -> bool:
    """True once the first-run intro has been dismissed."""
    return _safe_get(store, ONBOARDING_KEY) == "true"


def complete_onboarding(store: PreferenceStore) -> bool:
    return _safe_set(store, ONBOARDING_KEY, "true")


def get_notification_settings(store: PreferenceStore) -> NotificationSettings:
    """Stored reminder settings, defaulting to disabled at 08:00."""
    enabled = _safe_get(store, NOTIFICATION_ENABLED_KEY)
    time_str = _safe_get(store, NOTIFICATION_TIME_KEY)
    try:
        time = json.loads(time_str) if time_str else {}
        return NotificationSettings(
            enabled=enabled == "true",
            **{k: time[k] for k in ("hour", "minute") if k in time},
        )
    except (json.JSONDecodeError, TypeError, ValidationError) as exc:
        logger.warning("Ignoring invalid notification settings: %s", exc)
        return NotificationSettings()


def save_notification_settings(store: PreferenceStore, settings: NotificationSettings) -> bool:
    ok = _safe_set(store, NOTIFICATION_ENABLED_KEY, "true" if settings.enabled else "false")
    return ok and _safe_set(
        store,
        NOTIFICATION_TIME_KEY,
        json.dumps({"hour": settings.hour, "minute": settings.minute}),
    )


# Simple string-valued preference fields and their keys
_STRING_FIELDS: dict[str, str] = {
    "view_mode": VIEW_TYPE_KEY,
    "dot_color": DOT_COLOR_KEY,
    "background": BACKGROUND_KEY,
    "custom_background_uri": CUSTOM_BACKGROUND_KEY,
    "font": FONT_KEY,
}


def load_preferences(store: PreferenceStore) -> Preferences:
    """Assemble Preferences from the store.

    Each field is validated on its own; a bad stored value is logged and
    replaced by its default rather than discarding every preference.
    """
    prefs = Preferences()
    candidates: dict[str, object] = {}
    for field_name, key in _STRING_FIELDS.items():
        raw = _safe_get(store, key)
        if raw is not None:
            candidates[field_name] = raw
    birth_year = get_birth_year(store)
    if birth_year is not None:
        candidates["birth_year"] = birth_year
    opacity = _safe_get(store, OVERLAY_OPACITY_KEY)
    if opacity is not None:
        candidates["overlay_opacity"] = opacity
    onboarding = _safe_get(store, ONBOARDING_KEY)
    if onboarding is not None:
        candidates["onboarding_complete"] = onboarding == "true"

    for field_name, value in candidates.items():
        try:
            prefs = Preferences.model_validate({**prefs.model_dump(), field_name: value})
        except ValidationError:
            logger.warning("Ignoring invalid stored %s=%r", field_name, value)
    return prefs.model_copy(update={"notifications": get_notification_settings(store)})


def save_preferences(store: PreferenceStore, prefs: Preferences) -> bool:
    """Write every preference field. Returns False if any write failed."""
    ok = True
    for field_name, key in _STRING_FIELDS.items():
        value = getattr(prefs, field_name)
        if value is None:
            ok = _safe_remove(store, key) and ok
        else:
            ok = _safe_set(store, key, str(value)) and ok
    if prefs.birth_year is not None:
        ok = save_birth_year(store, prefs.birth_year) and ok
    else:
        ok = _safe_remove(store, BIRTH_YEAR_KEY) and ok
    ok = _safe_set(store, OVERLAY_OPACITY_KEY, str(prefs.overlay_opacity)) and ok
    ok = _safe_set(store, ONBOARDING_KEY, "true" if prefs.onboarding_complete else "false") and ok
    ok = save_notification_settings(store, prefs.notifications) and ok
    if ok:
        logger.debug("Saved preferences")
    return ok
