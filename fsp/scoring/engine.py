"""
Scoring engine for FSP.

Orchestrates the full scoring process:
1. Derive BMI from weight and height
2. Score each of the 13 factors
3. Sum the sub-scores into a total
4. Classify band
5. Return ScoreResult

The engine is stateless. Every call recomputes from scratch and the input
record is never modified.
"""

import logging

from fsp.core.types import Band, FactorScore, FertilityInput, ScoreResult
from fsp.scoring.bmi import compute_bmi
from fsp.scoring.factors import FACTOR_SCORERS

logger = logging.getLogger(__name__)


def calculate_total(components: tuple[FactorScore, ...] | list[FactorScore]) -> int:
    """Sum of sub-scores."""
    return sum(c.score for c in components)


def classify_band(total: int) -> Band:
    """
    Classify a total into its band.

    Args:
        total: Sum of sub-scores in [0, 39]

    Returns:
        Band classification
    """
    return Band.from_total(total)


def compute_score(record: FertilityInput) -> ScoreResult:
    """
    Score an input record.

    Args:
        record: Current calculator inputs

    Returns:
        ScoreResult with BMI, per-factor components, total, and band
    """
    bmi = compute_bmi(record.weight, record.height)

    components = []
    for scorer in FACTOR_SCORERS:
        value = bmi if scorer.field == "bmi" else getattr(record, scorer.field)
        components.append(
            FactorScore(
                name=scorer.name,
                value=value,
                score=scorer.score(value),
            )
        )

    total = calculate_total(components)
    band = classify_band(total)

    logger.debug(f"Total score: {total} ({band.value}), BMI {bmi}")

    return ScoreResult(
        bmi=bmi,
        components=tuple(components),
        total=total,
        band=band,
    )

