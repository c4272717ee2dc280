# tickerview/data_sources.py
from __future__ import annotations

import http.client
import io
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd

from tickerview.config import COLUMN_ALIASES
from tickerview.errors import DataSourceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnMap:
    date: str
    key: str
    price: str


def _normalize_name(name: str) -> str:
    n = str(name).strip().lower().replace(" ", "_").replace("-", "_")
    if n.endswith("_raw"):
        n = n[: -len("_raw")]
    return n


def resolve_columns(header) -> ColumnMap:
    """
    Map the header of the input file onto the three fields we need.
    Matching is by normalised name, so "Close_Price_Raw", "close price" and
    "CLOSE" all resolve to the price column.
    """
    found = {}
    for role, aliases in COLUMN_ALIASES.items():
        for col in header:
            if _normalize_name(col) in aliases:
                found[role] = col
                break

    missing = [role for role in COLUMN_ALIASES if role not in found]
    if missing:
        raise DataSourceError(
            f"Header is missing required field(s): {', '.join(missing)} (got {list(header)})"
        )
    return ColumnMap(date=found["date"], key=found["key"], price=found["price"])


def read_source(source: str | Path) -> str:
    """Return the raw text of a local file or an http(s) URL."""
    src = str(source)
    try:
        if src.startswith(("http://", "https://")):
            with urllib.request.urlopen(src, timeout=30) as resp:
                return resp.read().decode("utf-8-sig")
        return Path(src).read_text(encoding="utf-8-sig")
    except (OSError, urllib.error.URLError, http.client.HTTPException,
            ValueError) as exc:
        raise DataSourceError(f"Could not read price data from {src}: {exc}", source=src) from exc


def parse_rows(text: str, columns: ColumnMap | None = None) -> pd.DataFrame:
    """
    Parse delimited text into a flat frame of candidate records.

    Returns columns key, date, price in file order. Rows with an empty key,
    an empty or unparseable date, or a non-numeric price are dropped.
    """
    try:
        raw = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            index_col=False,
            keep_default_na=False,
            skip_blank_lines=True,
            on_bad_lines="skip",
        )
    except pd.errors.EmptyDataError as exc:
        raise DataSourceError("Price data has no header row") from exc
    except pd.errors.ParserError as exc:
        raise DataSourceError(f"Price data is unreadable: {exc}") from exc

    cols = columns or resolve_columns(raw.columns)
    for name in (cols.date, cols.key, cols.price):
        if name not in raw.columns:
            raise DataSourceError(f"Header is missing column {name!r}")

    keys = raw[cols.key].fillna("").astype(str).str.strip()

    date_text = raw[cols.date].fillna("").astype(str).str.strip()
    try:
        dates = pd.to_datetime(date_text, errors="coerce", format="ISO8601")
    except ValueError:
        # mixed offsets, e.g. some rows with "Z" and some without
        dates = pd.to_datetime(date_text, errors="coerce", format="ISO8601", utc=True)
    if getattr(dates.dt, "tz", None) is not None:
        dates = dates.dt.tz_convert(None)
    dates = dates.dt.normalize()

    prices = pd.to_numeric(raw[cols.price].fillna("").astype(str).str.strip(), errors="coerce")
    prices = prices.astype("float64")

    ok = (keys != "") & dates.notna() & np.isfinite(prices)

    out = pd.DataFrame(
        {
            "key": keys[ok],
            "date": dates[ok],
            "price": prices[ok],
        }
    ).reset_index(drop=True)

    dropped = len(raw) - len(out)
    if dropped:
        logger.info("Dropped %d malformed row(s) of %d", dropped, len(raw))
    return out


def load_records(source: str | Path, columns: ColumnMap | None = None) -> pd.DataFrame:
    return parse_rows(read_source(source), columns=columns)
