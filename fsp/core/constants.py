"""
Constants for FSP.

These values are FROZEN and must not be tuned or optimized.
They reproduce the published scoring tables exactly.
"""

from typing import Final

# =============================================================================
# FACTORS
# =============================================================================
# Canonical order of the score record. Breakdowns are displayed in this order.

FACTOR_NAMES: Final[tuple[str, ...]] = (
    "age",
    "bmi",
    "marriage",
    "lifestyle",
    "menstruation",
    "sex",
    "diagnosis",
    "ovulation",
    "stress",
    "sleep",
    "diet",
    "substance",
    "familyHistory",
)

MAX_FACTOR_SCORE: Final[int] = 3
MAX_TOTAL: Final[int] = MAX_FACTOR_SCORE * len(FACTOR_NAMES)  # 39

# Score for any categorical label missing from its table
DEFAULT_CATEGORICAL_SCORE: Final[int] = 1

# =============================================================================
# CATEGORICAL TABLES (FROZEN)
# =============================================================================

LIFESTYLE_SCORES: Final[dict[str, int]] = {
    "Active": 3,
    "Good": 2,
    "Moderate": 1,
    "Sedentary": 0,
}

MENSTRUATION_SCORES: Final[dict[str, int]] = {
    "Regular": 3,
    "Regularly/irregular": 2,
    "Irregular": 1,
    "Irregularly/irregular": 0,
}

SEX_SCORES: Final[dict[str, int]] = {
    "Regular": 3,
    "Irregular": 2,
    "Once a week": 1,
    "Once a month": 0,
}

DIAGNOSIS_SCORES: Final[dict[str, int]] = {
    "No factor": 3,
    "One factor": 2,
    "Two factors": 1,
    "Multiple factors": 0,
}

OVULATION_SCORES: Final[dict[str, int]] = {
    "Always": 3,
    "Mostly": 2,
    "Rare": 1,
    "None": 0,
}

STRESS_SCORES: Final[dict[str, int]] = {
    "Low": 3,
    "Moderate": 2,
    "High": 1,
    "Severe": 0,
}

SLEEP_SCORES: Final[dict[str, int]] = {
    "Good": 3,
    "Fair": 2,
    "Poor": 1,
    "Insomnia": 0,
}

DIET_SCORES: Final[dict[str, int]] = {
    "Balanced": 3,
    "Mostly balanced": 2,
    "Junk": 1,
    "Poor": 0,
}

SUBSTANCE_SCORES: Final[dict[str, int]] = {
    "None": 3,
    "Occasional": 2,
    "Frequent": 1,
    "Daily": 0,
}

FAMILY_HISTORY_SCORES: Final[dict[str, int]] = {
    "No history": 3,
    "Remote": 2,
    "Close": 1,
    "Multiple": 0,
}

# =============================================================================
# INPUT FIELDS
# =============================================================================
# Select options per categorical field, in display order (best first).

FIELD_OPTIONS: Final[dict[str, tuple[str, ...]]] = {
    "lifestyle": tuple(LIFESTYLE_SCORES),
    "menstruation": tuple(MENSTRUATION_SCORES),
    "sex_frequency": tuple(SEX_SCORES),
    "diagnosis": tuple(DIAGNOSIS_SCORES),
    "ovulation": tuple(OVULATION_SCORES),
    "stress": tuple(STRESS_SCORES),
    "sleep": tuple(SLEEP_SCORES),
    "diet": tuple(DIET_SCORES),
    "substance": tuple(SUBSTANCE_SCORES),
    "family_history": tuple(FAMILY_HISTORY_SCORES),
}

# (min, max, step) per numeric field, as enforced by the input widgets
NUMERIC_RANGES: Final[dict[str, tuple[int, int, int]]] = {
    "age": (18, 60, 1),
    "weight": (30, 200, 1),
    "height": (100, 220, 1),
    "marriage_years": (0, 40, 1),
}

# camelCase keys accepted when loading profiles
FIELD_ALIASES: Final[dict[str, str]] = {
    "marriageYears": "marriage_years",
    "sexFrequency": "sex_frequency",
    "familyHistory": "family_history",
}

# =============================================================================
# BAND THRESHOLDS (FROZEN)
# =============================================================================
# Inclusive lower bounds, evaluated highest first. Higher total = better.

BAND_THRESHOLDS: Final[tuple[tuple[str, int], ...]] = (
    ("Green", 30),
    ("Blue", 20),
    ("Orange", 10),
    ("Red", 5),
    ("Black", 0),
)

DISCLAIMER: Final[str] = "Educational aid only – not a diagnosis."
