"""Explanation generation for FSP."""

from fsp.explain.generator import ExplanationGenerator
from fsp.explain.templates import BAND_TEMPLATES, FACTOR_LABELS, RANGE_HINTS

__all__ = [
    "BAND_TEMPLATES",
    "FACTOR_LABELS",
    "RANGE_HINTS",
    "ExplanationGenerator",
]
