# tickerview/state.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Union

import pandas as pd

from tickerview.data_sources import load_records
from tickerview.errors import DataSourceError
from tickerview.series import available_keys, build_series_map

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True, eq=False)
class Loaded:
    series_map: dict[str, pd.Series]
    loaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def keys(self) -> list[str]:
        return available_keys(self.series_map)


@dataclass(frozen=True)
class Failed:
    reason: str


LoadState = Union[Loading, Loaded, Failed]


def load_state(source: str) -> Loaded | Failed:
    """Read, parse and group the price file. Source failures become Failed."""
    try:
        records = load_records(source)
    except DataSourceError as exc:
        logger.error("Price data load failed: %s", exc)
        return Failed(str(exc))

    series_map = build_series_map(records)
    logger.info("Loaded %d observations across %d instruments from %s",
                len(records), len(series_map), source)
    return Loaded(series_map)


def series_map_for(state: LoadState) -> dict[str, pd.Series]:
    return state.series_map if isinstance(state, Loaded) else {}


def keys_for(state: LoadState) -> list[str]:
    return state.keys if isinstance(state, Loaded) else []


def status_text(state: LoadState) -> str:
    if isinstance(state, Loading):
        return "Loading data..."
    if isinstance(state, Failed):
        return f"Could not load price data. {state.reason}"
    if not state.series_map:
        return "No price data found."
    return ""
