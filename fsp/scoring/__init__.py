"""Scoring module for FSP."""

from fsp.scoring.bmi import compute_bmi
from fsp.scoring.engine import classify_band, compute_score
from fsp.scoring.factors import FACTOR_SCORERS

__all__ = [
    "FACTOR_SCORERS",
    "classify_band",
    "compute_bmi",
    "compute_score",
]
