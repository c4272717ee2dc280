"""Tests for the Streamlit shell: window edits, ticker switches and presets."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

import tickerview.config
from tickerview.ranges import DateWindow

APP_FILE = str(Path(__file__).parent.parent / "app.py")

APP_CSV = """Date,TICKER,Close_Price_Raw
2022-01-01,AAA,10.0
2022-06-01,AAA,11.0
2023-01-01,AAA,12.5
2023-05-15,AAA,13.0
2023-06-01,AAA,14.0
2021-03-01,BBB,50.0
2021-09-01,BBB,45.0
"""

AAA_DEFAULT = DateWindow(dt.date(2022, 6, 1), dt.date(2023, 6, 1))
BBB_DEFAULT = DateWindow(dt.date(2021, 3, 1), dt.date(2021, 9, 1))


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def app(tmp_path, monkeypatch) -> AppTest:
    """App loaded from a small two-ticker file, after its first run."""
    p = tmp_path / "data.csv"
    p.write_text(APP_CSV, encoding="utf-8")
    monkeypatch.setenv("TICKERVIEW_DATA_SOURCE", str(p))
    # config is imported once per process, so point the loaded module at the file too
    monkeypatch.setattr(tickerview.config, "DATA_SOURCE", str(p))
    st.cache_data.clear()

    at = AppTest.from_file(APP_FILE, default_timeout=30)
    at.run()
    assert not at.exception
    return at


# ============================================================================
# Tests: initial state
# ============================================================================


class TestInitialState:
    def test_first_ticker_with_default_window(self, app):
        assert app.session_state["ticker"] == "AAA"
        assert app.session_state["window"] == AAA_DEFAULT
        assert app.date_input(key="start_input").value == AAA_DEFAULT.start
        assert app.date_input(key="end_input").value == AAA_DEFAULT.end

    def test_failed_load_shows_error(self, tmp_path, monkeypatch):
        monkeypatch.setattr(tickerview.config, "DATA_SOURCE", str(tmp_path / "missing.csv"))
        st.cache_data.clear()
        at = AppTest.from_file(APP_FILE, default_timeout=30)
        at.run()
        assert not at.exception
        assert at.error[0].value.startswith("Could not load price data.")


# ============================================================================
# Tests: date edits
# ============================================================================


class TestDateEdits:
    def test_rejected_edit_keeps_window_and_resets_widget(self, app):
        one_week_before_end = AAA_DEFAULT.end - dt.timedelta(days=7)
        app.date_input(key="start_input").set_value(one_week_before_end).run()

        assert not app.exception
        assert app.session_state["window"] == AAA_DEFAULT
        assert app.date_input(key="start_input").value == AAA_DEFAULT.start
        assert app.date_input(key="end_input").value == AAA_DEFAULT.end

    def test_accepted_edit_moves_window(self, app):
        app.date_input(key="start_input").set_value(dt.date(2022, 1, 1)).run()

        assert app.session_state["window"] == DateWindow(dt.date(2022, 1, 1), AAA_DEFAULT.end)
        assert app.date_input(key="start_input").value == dt.date(2022, 1, 1)


# ============================================================================
# Tests: ticker switch and presets
# ============================================================================


class TestSelection:
    def test_switching_ticker_resets_to_default_window(self, app):
        app.date_input(key="start_input").set_value(dt.date(2022, 1, 1)).run()
        app.sidebar.radio[0].set_value("BBB").run()

        assert not app.exception
        assert app.session_state["ticker"] == "BBB"
        assert app.session_state["window"] == BBB_DEFAULT
        assert app.date_input(key="start_input").value == BBB_DEFAULT.start
        assert app.date_input(key="end_input").value == BBB_DEFAULT.end

    def test_one_month_preset(self, app):
        app.button(key="preset_1M").click().run()

        expected = DateWindow(dt.date(2023, 5, 1), dt.date(2023, 6, 1))
        assert not app.exception
        assert app.session_state["window"] == expected
        assert app.date_input(key="start_input").value == expected.start

    def test_five_year_preset_clamped_to_first_date(self, app):
        app.button(key="preset_5Y").click().run()

        assert app.session_state["window"] == DateWindow(dt.date(2022, 1, 1), dt.date(2023, 6, 1))
