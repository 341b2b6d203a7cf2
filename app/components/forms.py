"""Reusable form components for the Streamlit app."""

from __future__ import annotations

from datetime import date, time

import streamlit as st

from dottime.config.defaults import DEFAULT_BIRTH_YEAR, DEFAULT_PREFS_PATH, MIN_BIRTH_YEAR
from dottime.config.schema import NotificationSettings, Preferences
from dottime.storage.store import JsonFilePreferenceStore, load_preferences


def preference_store() -> JsonFilePreferenceStore:
    """The store shared by every page."""
    return JsonFilePreferenceStore(DEFAULT_PREFS_PATH)


def session_preferences() -> Preferences:
    """Preferences cached in session state, loaded from disk on first use."""
    if "prefs" not in st.session_state:
        st.session_state["prefs"] = load_preferences(preference_store())
    prefs: Preferences = st.session_state["prefs"]
    return prefs


def birth_year_form(current: int | None, key: str = "birth_year") -> int | None:
    """Number input for the birth year, bounded to 1900..this year.

    Starts empty when no year is stored and returns None until one is entered.
    """
    year = st.number_input(
        "Birth Year",
        min_value=MIN_BIRTH_YEAR,
        max_value=date.today().year,
        value=current,
        step=1,
        placeholder=str(DEFAULT_BIRTH_YEAR),
        key=key,
    )
    return None if year is None else int(year)


def notification_form(settings: NotificationSettings) -> NotificationSettings:
    """Render reminder controls and return updated settings."""
    col1, col2 = st.columns(2)
    with col1:
        enabled = st.toggle("Daily Reminder", value=settings.enabled, key="notif_enabled")
    with col2:
        at = st.time_input(
            "Reminder Time",
            value=time(settings.hour, settings.minute),
            disabled=not enabled,
            key="notif_time",
        )
    return NotificationSettings(enabled=enabled, hour=at.hour, minute=at.minute)
