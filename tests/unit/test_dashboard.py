"""Tests for dashboard helpers that do not need a running Streamlit session."""

from fsp.core.constants import MAX_TOTAL
from fsp.core.types import Band
from fsp.dashboard.components.band_indicator import band_steps
from fsp.dashboard.components.feature_breakdown import breakdown_frame
from fsp.scoring.engine import compute_score


class TestBandSteps:
    """Tests for gauge step construction."""

    def test_steps_cover_full_range(self):
        steps = band_steps()

        assert steps[0]["range"] == [30, MAX_TOTAL]
        assert steps[-1]["range"] == [0, 5]
        assert [s["color"] for s in steps] == [b.color for b in Band]


class TestBreakdownFrame:
    """Tests for the breakdown table."""

    def test_one_row_per_factor(self, mixed_input):
        frame = breakdown_frame(compute_score(mixed_input))

        assert len(frame) == 13
        assert list(frame.columns) == ["factor", "label", "input", "score"]
        assert frame["score"].sum() == 24
        assert frame.loc[frame["factor"] == "bmi", "input"].item() == "30.1"
