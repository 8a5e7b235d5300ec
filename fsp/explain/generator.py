"""
Explanation generator for FSP.

Generates human-readable explanations of score results.
"""

import logging

from fsp.core.constants import DISCLAIMER, MAX_FACTOR_SCORE
from fsp.core.types import ScoreResult
from fsp.explain.templates import BAND_TEMPLATES, FACTOR_LABELS


logger = logging.getLogger(__name__)


class ExplanationGenerator:
    """
    Generates human-readable explanations for FSP results.

    Combines:
    - Band-level interpretation
    - Weakest factors
    - Educational disclaimer
    """

    def __init__(self, max_factors: int = 3, include_disclaimer: bool = True) -> None:
        """
        Initialize explanation generator.

        Args:
            max_factors: Maximum number of weak factors to list
            include_disclaimer: Append the educational-use disclaimer
        """
        self.max_factors = max_factors
        self.include_disclaimer = include_disclaimer

    def generate(self, result: ScoreResult) -> str:
        """
        Generate complete explanation.

        Args:
            result: Scored result

        Returns:
            Human-readable explanation (structured with newlines)
        """
        lines: list[str] = []

        # 1. Band headline
        band_text = BAND_TEMPLATES.get(result.band, "")
        lines.append(
            f"**{result.band.value} ({result.total}/{result.max_total}):** {band_text}"
        )

        # 2. Weakest factors
        weak_lines = self._format_weak_factors(result)
        if weak_lines:
            lines.append("")
            lines.append("**Lowest-scoring factors:**")
            lines.extend(weak_lines)

        # 3. Disclaimer
        if self.include_disclaimer:
            lines.append("")
            lines.append(DISCLAIMER)

        return "\n".join(lines)

    def _format_weak_factors(self, result: ScoreResult) -> list[str]:
        """
        Format factors scoring 0 or 1 as bullet points, lowest first.

        Ties keep canonical factor order.
        """
        weak = sorted(
            (c for c in result.components if c.score <= 1),
            key=lambda c: c.score,
        )[: self.max_factors]

        return [
            f"• {FACTOR_LABELS.get(c.name, c.name)}: {c.value} "
            f"({c.score}/{MAX_FACTOR_SCORE})"
            for c in weak
        ]

    def format_component_breakdown(self, result: ScoreResult) -> str:
        """
        Format detailed component breakdown.

        Returns:
            Multi-line breakdown text
        """
        lines = ["Factor Breakdown:"]

        for comp in result.components:
            lines.append(f"  {comp.name}: {comp.score} / {MAX_FACTOR_SCORE}")

        return "\n".join(lines)

    def format_summary(self, result: ScoreResult) -> str:
        """
        Format one-line summary.

        Returns:
            One-line summary
        """
        return (
            f"FSP: {result.total}/{result.max_total} "
            f"({result.band.value}), BMI {result.bmi}"
        )
