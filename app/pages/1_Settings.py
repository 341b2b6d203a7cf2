"""Settings page — appearance, birth year, daily reminder."""

from __future__ import annotations

import streamlit as st

from app.components.forms import (
    birth_year_form,
    notification_form,
    preference_store,
    session_preferences,
)
from dottime.config.schema import Preferences
from dottime.core.clock import today
from dottime.core.timecalc import compute_time_data
from dottime.notify.reminders import build_daily_reminder, make_rng, random_quote
from dottime.storage.store import save_preferences
from dottime.theme.presets import (
    background_name,
    background_presets,
    dot_color_presets,
    dot_colors,
    font_presets,
)

st.set_page_config(page_title="Settings — dottime", layout="centered")
st.title("Settings")

prefs: Preferences = session_preferences()

st.subheader("Appearance")
col1, col2 = st.columns(2)
with col1:
    color_keys = dot_color_presets()
    dot_color = st.selectbox(
        "Dot Color",
        color_keys,
        index=color_keys.index(prefs.dot_color),
        format_func=lambda k: dot_colors(k).name,
    )
with col2:
    font_keys = font_presets()
    font = st.selectbox("Font", font_keys, index=font_keys.index(prefs.font))

bg_keys = background_presets() + ["custom"]
background = st.selectbox(
    "Background",
    bg_keys,
    index=bg_keys.index(prefs.background),
    format_func=lambda k: "Custom Image" if k == "custom" else background_name(k),
)
custom_background_uri = prefs.custom_background_uri
if background == "custom":
    custom_background_uri = st.text_input("Image URL", value=custom_background_uri or "") or None
overlay_opacity = prefs.overlay_opacity
if background == "custom" and custom_background_uri:
    overlay_opacity = st.slider(
        "Overlay Opacity",
        min_value=0.0,
        max_value=1.0,
        value=prefs.overlay_opacity,
        step=0.05,
        help="Darkens the background so the dots stay readable",
    )

st.subheader("Life View")
birth_year = birth_year_form(prefs.birth_year)

st.subheader("Daily Reminder")
notifications = notification_form(prefs.notifications)
if notifications.enabled:
    month = compute_time_data("month", prefs.effective_birth_year, today())
    preview = build_daily_reminder(month, notifications, random_quote(make_rng()))
    st.caption(f"{preview.hour:02d}:{preview.minute:02d} — **{preview.title}** · {preview.body}")

if st.button("Save", type="primary"):
    updated = prefs.model_copy(
        update={
            "dot_color": dot_color,
            "font": font,
            "background": background,
            "custom_background_uri": custom_background_uri,
            "overlay_opacity": overlay_opacity,
            "birth_year": birth_year,
            "notifications": notifications,
        }
    )
    st.session_state["prefs"] = updated
    if save_preferences(preference_store(), updated):
        st.success("Settings saved!")
    else:
        st.warning("Settings applied for this session but could not be written to disk.")
