import pandas as pd
from dataclasses import dataclass
from typing import Optional

from tickerview.ranges import DateWindow


# ── Visible slice ─────────────────────────────────────────────────────────────

def project(series: pd.Series, window: Optional[DateWindow]) -> pd.Series:
    """Observations with window.start <= date <= window.end, in series order."""
    if series is None:
        return pd.Series(dtype="float64")
    if window is None or series.empty:
        return series.iloc[0:0]
    lo = pd.Timestamp(window.start)
    hi = pd.Timestamp(window.end)
    mask = (series.index >= lo) & (series.index <= hi)
    return series.loc[mask]


# ── Profitability ─────────────────────────────────────────────────────────────

def profitability_delta(s: pd.Series) -> float:
    """Last price minus first price. 0 with fewer than two points."""
    if s is None or len(s) < 2:
        return 0.0
    return float(s.iloc[-1] - s.iloc[0])


def profitability_pct(s: pd.Series) -> Optional[float]:
    if s is None or len(s) < 2:
        return None
    first = float(s.iloc[0])
    if first == 0:
        return None
    return profitability_delta(s) / first


@dataclass(frozen=True, eq=False)
class ViewSlice:
    key: str
    window: DateWindow
    series: pd.Series

    @property
    def is_empty(self) -> bool:
        return self.series.empty

    @property
    def delta(self) -> float:
        return profitability_delta(self.series)

    @property
    def pct(self) -> Optional[float]:
        return profitability_pct(self.series)

    @property
    def last_price(self) -> Optional[float]:
        return None if self.series.empty else float(self.series.iloc[-1])


def build_view(series_map: dict, key: Optional[str], window: Optional[DateWindow]) -> Optional[ViewSlice]:
    """Derived view for the current selection. None when nothing is selectable."""
    if not key or window is None or key not in (series_map or {}):
        return None
    return ViewSlice(key=key, window=window, series=project(series_map[key], window))
