"""
Band indicator component for FSP dashboard.

Displays a semicircular gauge showing the current total.
"""

import plotly.graph_objects as go
import streamlit as st

from fsp.core.constants import BAND_THRESHOLDS, MAX_TOTAL
from fsp.core.types import Band


def band_steps() -> list[dict]:
    """Gauge steps, one per band, spanning [0, MAX_TOTAL]."""
    steps = []
    upper = MAX_TOTAL
    for name, lower in BAND_THRESHOLDS:
        steps.append({"range": [lower, upper], "color": Band(name).color})
        upper = lower
    return steps


def render_band_indicator(band: Band, total: int) -> None:
    """
    Render the semicircular gauge indicator.

    Args:
        band: Band classification
        total: Total score (0-39)
    """
    fig = go.Figure(
        go.Indicator(
            mode="gauge+number",
            value=total,
            title={"text": "FSP Total", "font": {"size": 16, "color": "#6b7280"}},
            number={"font": {"size": 48, "color": "#1f2937"}, "suffix": f" / {MAX_TOTAL}"},
            gauge={
                "axis": {
                    "range": [0, MAX_TOTAL],
                    "tickwidth": 2,
                    "tickcolor": "#9ca3af",
                    "tickfont": {"color": "#6b7280", "size": 12},
                    "tickvals": [0, 5, 10, 20, 30, MAX_TOTAL],
                },
                "bar": {"color": "rgba(0,0,0,0)"},  # Hide the bar, use threshold
                "bgcolor": "#f3f4f6",
                "borderwidth": 0,
                "steps": band_steps(),
                "threshold": {
                    "line": {"color": "#9333ea", "width": 4},
                    "thickness": 0.8,
                    "value": total,
                },
            },
        )
    )

    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font={"color": "#374151"},
        height=280,
        margin=dict(l=30, r=30, t=50, b=20),
    )

    st.plotly_chart(fig, width="stretch")

    st.markdown(
        f"<h3 style='text-align:center;'>{band.value} ({band.range_label}): "
        f"{band.description}</h3>",
        unsafe_allow_html=True,
    )
