"""
Per-factor scorers for FSP.

Each scorer maps one input to an integer sub-score in [0, 3].

Two shapes:
    - Range scorers (age, BMI, marriage years): ordered inclusive ranges,
      evaluated top to bottom, first match wins.
    - Categorical scorers: exact label lookup with a neutral default of 1
      for any label not in the table.

Branch order in the range scorers is FROZEN. Some later branches are
unreachable given the earlier ones; they are kept as published and must
not be collapsed.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from fsp.core.constants import (
    DEFAULT_CATEGORICAL_SCORE,
    DIAGNOSIS_SCORES,
    DIET_SCORES,
    FAMILY_HISTORY_SCORES,
    LIFESTYLE_SCORES,
    MENSTRUATION_SCORES,
    OVULATION_SCORES,
    SEX_SCORES,
    SLEEP_SCORES,
    STRESS_SCORES,
    SUBSTANCE_SCORES,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RANGE SCORERS
# =============================================================================


def score_age(v: float) -> int:
    """21-30 -> 3, 31-35 -> 2, 36-40 -> 1, >40 -> 0, otherwise 0."""
    if 21 <= v <= 30:
        return 3
    if 31 <= v <= 35:
        return 2
    if 36 <= v <= 40:
        return 1
    if v > 40:
        return 0
    return 0


def score_bmi(v: float) -> int:
    """
    Score a BMI value.

    24-28 -> 3, 29-35 -> 2, <22 -> 1, >35 -> 0, 22-24 -> 2,
    28-29 (exclusive) -> 2, otherwise 1.
    """
    if 24 <= v <= 28:
        return 3
    if 29 <= v <= 35:
        return 2
    if v < 22:
        return 1
    if v > 35:
        return 0
    if 22 <= v < 24:
        return 2
    if 28 < v < 29:
        return 2
    return 1


def score_marriage_years(v: float) -> int:
    """2 -> 3, 3-5 -> 2, 6-7 -> 1, >7 -> 0, 1-2 (exclusive) -> 3, otherwise 0."""
    if v == 2:
        return 3
    if 3 <= v <= 5:
        return 2
    if 6 <= v <= 7:
        return 1
    if v > 7:
        return 0
    if 1 <= v < 2:
        return 3
    return 0


# =============================================================================
# CATEGORICAL SCORERS
# =============================================================================


def score_categorical(table: dict[str, int], label: Any, factor: str = "") -> int:
    """
    Look up a label in a scoring table.

    Args:
        table: Label -> sub-score mapping
        label: Selected label
        factor: Factor name, used only for logging

    Returns:
        Sub-score, or DEFAULT_CATEGORICAL_SCORE if the label is unknown
    """
    try:
        return table[label]
    except (KeyError, TypeError):
        logger.debug(
            f"Unrecognized {factor or 'categorical'} label {label!r}, "
            f"using default score {DEFAULT_CATEGORICAL_SCORE}"
        )
        return DEFAULT_CATEGORICAL_SCORE


def score_lifestyle(v: Any) -> int:
    return score_categorical(LIFESTYLE_SCORES, v, "lifestyle")


def score_menstruation(v: Any) -> int:
    return score_categorical(MENSTRUATION_SCORES, v, "menstruation")


def score_sex(v: Any) -> int:
    return score_categorical(SEX_SCORES, v, "sex")


def score_diagnosis(v: Any) -> int:
    return score_categorical(DIAGNOSIS_SCORES, v, "diagnosis")


def score_ovulation(v: Any) -> int:
    return score_categorical(OVULATION_SCORES, v, "ovulation")


def score_stress(v: Any) -> int:
    return score_categorical(STRESS_SCORES, v, "stress")


def score_sleep(v: Any) -> int:
    return score_categorical(SLEEP_SCORES, v, "sleep")


def score_diet(v: Any) -> int:
    return score_categorical(DIET_SCORES, v, "diet")


def score_substance(v: Any) -> int:
    return score_categorical(SUBSTANCE_SCORES, v, "substance")


def score_family_history(v: Any) -> int:
    return score_categorical(FAMILY_HISTORY_SCORES, v, "familyHistory")


# =============================================================================
# REGISTRY
# =============================================================================


@dataclass(frozen=True)
class FactorScorer:
    """Binds a factor name to the input field it reads and its scorer."""

    name: str
    field: str  # FertilityInput attribute; "bmi" is derived, not stored
    score: Callable[[Any], int]


FACTOR_SCORERS: tuple[FactorScorer, ...] = (
    FactorScorer("age", "age", score_age),
    FactorScorer("bmi", "bmi", score_bmi),
    FactorScorer("marriage", "marriage_years", score_marriage_years),
    FactorScorer("lifestyle", "lifestyle", score_lifestyle),
    FactorScorer("menstruation", "menstruation", score_menstruation),
    FactorScorer("sex", "sex_frequency", score_sex),
    FactorScorer("diagnosis", "diagnosis", score_diagnosis),
    FactorScorer("ovulation", "ovulation", score_ovulation),
    FactorScorer("stress", "stress", score_stress),
    FactorScorer("sleep", "sleep", score_sleep),
    FactorScorer("diet", "diet", score_diet),
    FactorScorer("substance", "substance", score_substance),
    FactorScorer("familyHistory", "family_history", score_family_history),
)
