"""
Score card component for FSP dashboard.

Displays the total score with band colour styling.
"""

import streamlit as st

from fsp.core.types import Band


def render_score_card(
    total: int,
    max_total: int,
    band: Band,
) -> None:
    """
    Render the main score card.

    Args:
        total: Sum of sub-scores
        max_total: Highest achievable total
        band: Band classification
    """
    color = band.color

    st.markdown(
        f"""
        <div style="
            background: linear-gradient(135deg, {color}20, {color}10);
            border-left: 4px solid {color};
            padding: 1.5rem;
            border-radius: 0.5rem;
            margin-bottom: 1rem;
        ">
            <div style="font-size: 0.875rem; color: #6b7280; margin-bottom: 0.5rem;">
                Total Score
            </div>
            <div style="display: flex; align-items: baseline; gap: 0.5rem;">
                <span style="font-size: 3rem; font-weight: bold; color: #9333ea;">
                    {total}
                </span>
                <span style="font-size: 1.25rem; color: #6b7280;">
                    / {max_total}
                </span>
            </div>
            <span style="
                display: inline-block;
                margin-top: 0.5rem;
                padding: 0.25rem 1rem;
                border-radius: 9999px;
                background: {color};
                color: white;
                font-weight: bold;
            ">
                {band.value}
            </span>
        </div>
        """,
        unsafe_allow_html=True,
    )
