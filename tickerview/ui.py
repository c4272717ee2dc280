# tickerview/ui.py
# Shared UI helpers for the Streamlit shell.
from html import escape

import streamlit as st


# ── Colour helpers ────────────────────────────────────────────────────────────

def delta_color(value: float) -> str:
    """Green for flat or up, red for down."""
    if value is None:
        return "#6b7280"
    return "#1f7a4f" if value >= 0 else "#b42318"


# ── Reusable HTML fragments ───────────────────────────────────────────────────

def delta_badge_html(value: float, pct: float | None = None) -> str:
    """Signed badge, e.g. "+2.00 (+20.00%)"."""
    if value is None:
        return "<span class='tv-badge tv-badge-neutral'>–</span>"
    cls = "tv-badge-green" if value >= 0 else "tv-badge-red"
    sign = "+" if value >= 0 else ""
    text = f"{sign}{value:.2f}"
    if pct is not None:
        text += f" ({sign}{pct*100:.2f}%)"
    return f"<span class='tv-badge {cls}'>{text}</span>"


def price_header_html(key: str | None, last_price: float | None, delta: float) -> str:
    title = escape(key) if key else "Select Ticker"
    out = f"<div class='tv-title'>{title}</div>"
    if key and last_price is not None:
        out += (
            f"<div class='tv-price' style='color:{delta_color(delta)};'>"
            f"${last_price:,.2f} {delta_badge_html(delta)}</div>"
        )
    return out


# ── CSS ───────────────────────────────────────────────────────────────────────

def inject_css():
    st.markdown(
        """
        <style>
        @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800;900&display=swap');

        /* ── Base ── */
        html, body, [class*="css"] {
          font-family: 'Inter', sans-serif;
        }
        .block-container {
          max-width: 1400px;
          padding-top: 3rem;
          padding-bottom: 3rem;
        }

        /* ── Preset buttons ── */
        .stButton > button {
          border-radius: 8px !important;
          padding: 0.35rem 0.75rem !important;
          font-size: 12px !important;
          font-weight: 600 !important;
          width: 100%;
        }

        /* ── Header ── */
        .tv-title {
          font-size: 26px;
          font-weight: 800;
          letter-spacing: -0.5px;
          line-height: 1.1;
        }
        .tv-price {
          font-size: 18px;
          font-weight: 600;
          margin-top: 4px;
        }

        /* ── Delta badge ── */
        .tv-badge {
          display: inline-block;
          padding: 2px 8px;
          border-radius: 999px;
          font-size: 13px;
          font-weight: 700;
          white-space: nowrap;
        }
        .tv-badge-green  { background: #dcfce7; color: #166534; }
        .tv-badge-red    { background: #fee2e2; color: #991b1b; }
        .tv-badge-neutral{ background: #f3f4f6; color: #374151; }

        /* ── Mobile ── */
        @media (max-width: 640px) {
          div[data-testid="stHorizontalBlock"] {
            flex-direction: column !important;
          }
          div[data-testid="column"] {
            width: 100% !important;
            min-width: 0 !important;
            flex: 1 1 100% !important;
          }
          .tv-title { font-size: 20px !important; }
          .js-plotly-plot, .plotly { max-width: 100% !important; }
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
