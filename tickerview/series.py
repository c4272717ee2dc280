# tickerview/series.py
from __future__ import annotations

import pandas as pd


def build_series_map(records: pd.DataFrame) -> dict[str, pd.Series]:
    """
    Group parsed records by instrument key.

    Each value is a float Series indexed by date, ascending. Equal dates keep
    the order they had in the file.
    """
    out: dict[str, pd.Series] = {}
    if records is None or records.empty:
        return out

    for key, grp in records.groupby("key", sort=True):
        grp = grp.sort_values("date", kind="stable")
        out[str(key)] = pd.Series(
            grp["price"].to_numpy(dtype="float64"),
            index=pd.DatetimeIndex(grp["date"], name="date"),
            name=str(key),
        )
    return out


def available_keys(series_map: dict[str, pd.Series]) -> list[str]:
    return sorted(series_map or {})


def filter_keys(keys: list[str], query: str | None) -> list[str]:
    q = (query or "").strip().lower()
    if not q:
        return list(keys)
    return [k for k in keys if q in k.lower()]
