# app.py
import logging
from datetime import date

import streamlit as st

from tickerview.charts import area_chart, color_for_delta
from tickerview.compute import build_view
from tickerview.config import CACHE_TTL, DATA_SOURCE
from tickerview.logs import init_logging
from tickerview.ranges import PRESETS, default_window, preset_window, validate_edit
from tickerview.series import filter_keys
from tickerview.state import Loading, Loaded, keys_for, load_state, series_map_for, status_text
from tickerview.ui import delta_badge_html, inject_css, price_header_html

st.set_page_config(
    page_title="Ticker View",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)

init_logging()
inject_css()
logger = logging.getLogger("tickerview.app")

# date_input defaults to a ten year range around its value otherwise
INPUT_MIN = date(1900, 1, 1)
INPUT_MAX = date(2100, 12, 31)

# ── Data ──────────────────────────────────────────────────────────────────────

@st.cache_data(ttl=CACHE_TTL, show_spinner=False)
def load_data(source: str):
    return load_state(source)


status = st.empty()
status.caption(status_text(Loading()))
state = load_data(DATA_SOURCE)
status.empty()

series_map = series_map_for(state)
tickers = keys_for(state)

# ── Session state ─────────────────────────────────────────────────────────────

def _sync_inputs(window) -> None:
    st.session_state["start_input"] = window.start
    st.session_state["end_input"] = window.end


def _set_window(window) -> None:
    st.session_state["window"] = window
    if window is not None:
        _sync_inputs(window)


def _on_date_edit(edge: str) -> None:
    prior = st.session_state.get("window")
    window = validate_edit(prior, edge, st.session_state.get(f"{edge}_input"))
    # a rejected edit returns the prior window, put the widgets back to it
    _set_window(window)


def _on_preset(months: int) -> None:
    series = series_map.get(st.session_state.get("ticker"))
    if series is None:
        return
    window = preset_window(series, months)
    if window is not None:
        _set_window(window)


if tickers and st.session_state.get("ticker") not in tickers:
    st.session_state["ticker"] = tickers[0]

# ── Sidebar ───────────────────────────────────────────────────────────────────

st.sidebar.title("Market")
query = st.sidebar.text_input("Search tickers", placeholder="Search tickers...",
                              label_visibility="collapsed")
visible = filter_keys(tickers, query)
current = st.session_state.get("ticker")

if not visible:
    st.sidebar.caption("No tickers found")
else:
    choice = st.sidebar.radio(
        "Ticker",
        options=visible,
        index=visible.index(current) if current in visible else None,
        label_visibility="collapsed",
    )
    if choice is not None:
        st.session_state["ticker"] = choice

st.sidebar.caption(f"Source: {DATA_SOURCE}")

ticker = st.session_state.get("ticker")

# New ticker or reloaded data: start again from the default window
window_token = (ticker, state.loaded_at if isinstance(state, Loaded) else None)
if st.session_state.get("window_token") != window_token:
    st.session_state["window_token"] = window_token
    _set_window(default_window(series_map[ticker]) if ticker in series_map else None)
    logger.info("Selected %s, window %s", ticker, st.session_state.get("window"))

view = build_view(series_map, ticker, st.session_state.get("window"))

# ── Header ────────────────────────────────────────────────────────────────────

head_l, head_r = st.columns([3, 4])

with head_l:
    delta = view.delta if view is not None else 0.0
    last_price = view.last_price if view is not None else None
    st.markdown(price_header_html(ticker, last_price, delta), unsafe_allow_html=True)

with head_r:
    preset_cols = st.columns(len(PRESETS))
    for col, spec in zip(preset_cols, PRESETS.values()):
        col.button(
            spec.label,
            key=f"preset_{spec.label}",
            on_click=_on_preset,
            args=(spec.months,),
            disabled=ticker not in series_map,
        )

    d_l, d_r = st.columns(2)
    has_window = st.session_state.get("window") is not None
    d_l.date_input("Start", key="start_input", min_value=INPUT_MIN, max_value=INPUT_MAX,
                   on_change=_on_date_edit, args=("start",), disabled=not has_window)
    d_r.date_input("End", key="end_input", min_value=INPUT_MIN, max_value=INPUT_MAX,
                   on_change=_on_date_edit, args=("end",), disabled=not has_window)

st.divider()

# ── Chart ─────────────────────────────────────────────────────────────────────

message = status_text(state)
if message:
    if isinstance(state, Loaded):
        st.info(message)
    else:
        st.error(message)
    st.stop()

if view is None or view.is_empty:
    st.info("No data available for this range")
    st.stop()

fig = area_chart(view.series, color=color_for_delta(view.delta))
st.plotly_chart(fig, use_container_width=True)

start_s, end_s = view.window.as_strings()
st.markdown(
    f"{len(view.series)} observations, {start_s} to {end_s} &nbsp; "
    f"{delta_badge_html(view.delta, view.pct)}",
    unsafe_allow_html=True,
)
