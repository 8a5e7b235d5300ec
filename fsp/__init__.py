"""
FSP - Fertility Score Predictor.

An educational calculator that scores a fixed set of health inputs.

Outputs:
    - 13 sub-scores, each in [0, 3]
    - Total score in [0, 39]
    - Interpretation band: Green / Blue / Orange / Red / Black

Design Philosophy:
    - Scoring is a pure function of the input record
    - Fixed lookup tables, no ML, no fitted parameters
    - Educational use only, not a diagnosis
"""

from fsp.core.types import (
    Band,
    FactorScore,
    FertilityInput,
    ScoreResult,
)
from fsp.scoring import compute_bmi, compute_score

__version__ = "1.0.0"

__all__ = [
    "Band",
    "FactorScore",
    "FertilityInput",
    "ScoreResult",
    "compute_bmi",
    "compute_score",
    "__version__",
]
