"""
Factor breakdown component for FSP dashboard.

Displays per-factor sub-scores as a bar chart and a table.
"""

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from fsp.core.constants import MAX_FACTOR_SCORE
from fsp.core.types import ScoreResult
from fsp.explain.templates import FACTOR_LABELS

SCORE_COLORS = {
    3: "#22c55e",
    2: "#3b82f6",
    1: "#f97316",
    0: "#dc2626",
}


def breakdown_frame(result: ScoreResult) -> pd.DataFrame:
    """
    Tabulate the score record.

    Returns:
        DataFrame with one row per factor in canonical order
    """
    return pd.DataFrame(
        [
            {
                "factor": c.name,
                "label": FACTOR_LABELS.get(c.name, c.name),
                "input": str(c.value),
                "score": c.score,
            }
            for c in result.components
        ]
    )


def render_feature_breakdown(result: ScoreResult) -> None:
    """
    Render factor breakdown chart and table.

    Args:
        result: Scored result
    """
    frame = breakdown_frame(result)

    fig = go.Figure()

    fig.add_trace(
        go.Bar(
            name="Sub-score",
            x=frame["label"],
            y=frame["score"],
            marker_color=[SCORE_COLORS.get(s, "#6b7280") for s in frame["score"]],
            text=[f"{s}" for s in frame["score"]],
            textposition="outside",
        )
    )

    fig.update_layout(
        title="Sub-scores by factor",
        yaxis_title="Score",
        yaxis_range=[0, MAX_FACTOR_SCORE + 0.5],
        showlegend=False,
        height=320,
        margin=dict(l=0, r=0, t=50, b=0),
    )

    st.plotly_chart(fig, width="stretch")

    st.dataframe(
        frame[["label", "input", "score"]],
        hide_index=True,
        width="stretch",
    )
