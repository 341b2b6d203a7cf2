"""Tests for the Streamlit form components."""

from __future__ import annotations

import pytest

testing = pytest.importorskip("streamlit.testing.v1")


def _birth_year_page() -> None:
    import streamlit as st

    from app.components.forms import birth_year_form

    st.session_state["entered"] = birth_year_form(st.session_state.get("stored"))


class TestBirthYearForm:
    def test_empty_until_entered(self) -> None:
        at = testing.AppTest.from_function(_birth_year_page).run()
        assert not at.exception
        assert at.session_state["entered"] is None

    def test_returns_entered_year(self) -> None:
        at = testing.AppTest.from_function(_birth_year_page).run()
        at.number_input[0].set_value(1985).run()
        assert at.session_state["entered"] == 1985

    def test_shows_stored_year(self) -> None:
        at = testing.AppTest.from_function(_birth_year_page)
        at.session_state["stored"] = 1970
        at.run()
        assert at.session_state["entered"] == 1970
