"""dottime — days left this month, this year, and in a life."""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the repo root is on sys.path so `from app.components...` imports work
# when running `streamlit run app/Home.py`.
_root = str(Path(__file__).resolve().parent.parent)
if _root not in sys.path:
    sys.path.insert(0, _root)

import streamlit as st

st.set_page_config(
    page_title="dottime",
    page_icon="●",
    layout="centered",
    initial_sidebar_state="collapsed",
)

from app.components.charts import dot_grid_chart, preview_cells, progress_bar_chart
from app.components.forms import birth_year_form, preference_store, session_preferences
from app.components.theme import apply_background, register_theme
from dottime.core.clock import today
from dottime.core.timecalc import VIEW_MODES, compute_time_data, generate_dot_cells
from dottime.notify.reminders import make_rng, random_welcome
from dottime.storage.store import complete_onboarding, save_preferences

register_theme()

prefs = session_preferences()
store = preference_store()

if not prefs.onboarding_complete:
    st.markdown("# dottime")
    st.caption("Visualize your time")
    st.plotly_chart(dot_grid_chart(preview_cells(), "month", prefs.dot_color))
    st.caption("Each dot is a day")
    if st.button("Get Started", type="primary"):
        complete_onboarding(store)
        st.session_state["prefs"] = prefs.model_copy(update={"onboarding_complete": True})
        st.rerun()
    st.stop()

if "welcome" not in st.session_state:
    st.session_state["welcome"] = random_welcome(make_rng())
    st.toast(st.session_state["welcome"])

view_mode = st.segmented_control(
    "View",
    options=list(VIEW_MODES),
    default=prefs.view_mode,
    format_func=str.title,
    label_visibility="collapsed",
) or prefs.view_mode

if view_mode != prefs.view_mode:
    prefs = prefs.model_copy(update={"view_mode": view_mode})
    st.session_state["prefs"] = prefs
    save_preferences(store, prefs)

if view_mode == "life" and prefs.birth_year is None:
    st.info("Enter your birth year to see the years you have left.")
    year = birth_year_form(None, key="home_birth_year")
    if st.button("Confirm", type="primary", disabled=year is None):
        prefs = prefs.model_copy(update={"birth_year": year})
        st.session_state["prefs"] = prefs
        save_preferences(store, prefs)
        st.rerun()

now = today()
time_data = compute_time_data(view_mode, prefs.effective_birth_year, now)
cells = generate_dot_cells(time_data, view_mode, now)

st.markdown(f"# {time_data.remaining_units}")
st.caption(time_data.label)

st.plotly_chart(progress_bar_chart(time_data, prefs.dot_color), use_container_width=True)

fig = dot_grid_chart(cells, view_mode, prefs.dot_color)
apply_background(
    fig,
    prefs.background,
    prefs.font,
    custom_uri=prefs.custom_background_uri,
    overlay_opacity=prefs.overlay_opacity,
)
st.plotly_chart(fig, use_container_width=False)
