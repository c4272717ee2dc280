"""Shared test fixtures."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pandas as pd
import pytest

from tickerview.data_sources import parse_rows
from tickerview.series import build_series_map


SAMPLE_CSV = """Date,TICKER,Close_Price_Raw
2023-01-01,AAA,10.0
2023-02-01,AAA,12.0
2023-01-15,BBB,5.0
"""


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def sample_map() -> dict:
    return build_series_map(parse_rows(SAMPLE_CSV))


@pytest.fixture
def long_series() -> pd.Series:
    """Month-start prices from 2015-01-01 to 2023-06-01, rising by 1 per month."""
    dates = pd.date_range("2015-01-01", "2023-06-01", freq="MS")
    return pd.Series(
        [100.0 + i for i in range(len(dates))],
        index=pd.DatetimeIndex(dates.tolist(), name="date"),
        name="LONG",
    )
