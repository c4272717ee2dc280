# tickerview/charts.py
import pandas as pd
import plotly.graph_objects as go


# ── Colour palette ────────────────────────────────────────────────────────────
GREEN = "#22c55e"
RED   = "#ef4444"
_GRID = "#f1f5f9"

_FILLS = {
    GREEN: "rgba(34,197,94,0.15)",
    RED:   "rgba(239,68,68,0.15)",
}


def color_for_delta(delta: float) -> str:
    return GREEN if (delta or 0.0) >= 0 else RED


def price_bounds(series: pd.Series, pad_ratio: float = 0.10) -> tuple[float, float]:
    """Y-axis range padded by pad_ratio of the visible price spread."""
    lo = float(series.min())
    hi = float(series.max())
    pad = max((hi - lo) * pad_ratio, 0.5)
    return lo - pad, hi + pad


def area_chart(series: pd.Series, title: str = "", color: str = GREEN,
               height: int = 500) -> go.Figure:
    """
    Price area chart for the visible slice.

    The fill runs down to an invisible baseline at the lower axis bound
    (fill="tonexty") rather than to zero, so the y-axis stays tight around
    the data.
    """
    fig = go.Figure()
    if series is None or series.empty:
        return fig

    y_lo, y_hi = price_bounds(series)

    fig.add_trace(go.Scatter(
        x=series.index, y=[y_lo] * len(series),
        mode="lines", line=dict(width=0),
        showlegend=False, hoverinfo="skip",
    ))
    fig.add_trace(go.Scatter(
        x=series.index, y=series.values,
        mode="lines", name=series.name or "Price",
        line=dict(color=color, width=2),
        fill="tonexty",
        fillcolor=_FILLS.get(color, "rgba(148,163,184,0.15)"),
        hovertemplate="%{x|%b %d, %Y}<br><b>$%{y:.2f}</b><extra></extra>",
    ))

    fig.update_layout(
        title=title,
        height=height,
        margin=dict(l=20, r=20, t=50 if title else 20, b=20),
        showlegend=False,
        plot_bgcolor="white",
        paper_bgcolor="white",
        hovermode="x unified",
    )
    fig.update_xaxes(showgrid=False, tickformat="%b %d")
    fig.update_yaxes(
        range=[y_lo, y_hi],
        autorange=False,
        showgrid=True, gridcolor=_GRID, griddash="dash",
        tickprefix="$", tickformat=",.0f",
    )
    return fig
