# tickerview/ranges.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime

import pandas as pd

from tickerview.config import (
    DEFAULT_LOOKBACK_MONTHS,
    MAX_WINDOW_MONTHS,
    MIN_WINDOW_MONTHS,
)

logger = logging.getLogger(__name__)

EDGES = ("start", "end")


@dataclass(frozen=True)
class DateWindow:
    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"window start {self.start} is after end {self.end}")

    def as_strings(self) -> tuple[str, str]:
        return self.start.isoformat(), self.end.isoformat()


@dataclass(frozen=True)
class PresetSpec:
    label: str
    months: int


PRESETS = {
    "1M": PresetSpec("1M", 1),
    "6M": PresetSpec("6M", 6),
    "1Y": PresetSpec("1Y", 12),
    "5Y": PresetSpec("5Y", 60),
}


# ── Date helpers ──────────────────────────────────────────────────────────────

def to_date(value) -> date | None:
    """Coerce widget or text input to a date. None when missing or unparseable."""
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text)
        except ValueError:
            return None
    return None


def shift_months(d: date, months: int) -> date:
    # DateOffset clamps to month end: Mar 31 - 1 month = Feb 28
    return (pd.Timestamp(d) + pd.DateOffset(months=months)).date()


def whole_months_between(start: date, end: date) -> int:
    """Largest k >= 0 with start + k months <= end. Jan 15 -> Feb 14 is 0."""
    if end < start:
        return 0
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if shift_months(start, months) > end:
        months -= 1
    return months


def series_bounds(series: pd.Series) -> tuple[date, date] | None:
    if series is None or series.empty:
        return None
    return series.index[0].date(), series.index[-1].date()


# ── Windows derived from data ────────────────────────────────────────────────

def _lookback_window(series: pd.Series, months: int) -> DateWindow | None:
    bounds = series_bounds(series)
    if bounds is None:
        return None
    first, last = bounds
    start = shift_months(last, -months)
    if start < first:
        start = first
    return DateWindow(start, last)


def default_window(series: pd.Series) -> DateWindow | None:
    """Last year of data, or the whole series if it is shorter. None if empty."""
    return _lookback_window(series, DEFAULT_LOOKBACK_MONTHS)


def preset_window(series: pd.Series, months: int) -> DateWindow | None:
    if isinstance(months, bool) or not isinstance(months, int) or months < 1:
        raise ValueError(f"preset months must be a positive integer, got {months!r}")
    return _lookback_window(series, months)


# ── User edits ────────────────────────────────────────────────────────────────

def validate_edit(window: DateWindow | None, edge: str, new_value) -> DateWindow | None:
    """
    Replace one edge of the window and check the result.

    Returns the new window, or the unchanged prior window when the candidate
    is incomplete, reversed, shorter than MIN_WINDOW_MONTHS or longer than
    MAX_WINDOW_MONTHS.
    """
    if edge not in EDGES:
        raise ValueError(f"edge must be one of {EDGES}, got {edge!r}")

    current_start = window.start if window is not None else None
    current_end = window.end if window is not None else None
    start = to_date(new_value) if edge == "start" else current_start
    end = to_date(new_value) if edge == "end" else current_end

    if start is None or end is None:
        logger.debug("Ignoring incomplete %s edit: %r", edge, new_value)
        return window

    if start > end:
        logger.info("Ignoring %s edit: %s is after %s", edge, start, end)
        return window

    months = whole_months_between(start, end)
    if months < MIN_WINDOW_MONTHS:
        logger.warning("Minimum duration is %d month", MIN_WINDOW_MONTHS)
        return window
    if months > MAX_WINDOW_MONTHS:
        logger.warning("Maximum duration is %d months", MAX_WINDOW_MONTHS)
        return window

    return DateWindow(start, end)
