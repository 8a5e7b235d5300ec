"""
Input collector for FSP.

Owns the current input record for one session. Each setter swaps in a
fresh immutable record and synchronously recomputes the result, so the
result always reflects the latest inputs.
"""

import logging
from typing import Any

from fsp.core.constants import NUMERIC_RANGES
from fsp.core.types import FertilityInput, ScoreResult, clamp, coerce_field_value
from fsp.scoring.engine import compute_score

logger = logging.getLogger(__name__)


class InputCollector:
    """
    Holds calculator state between input changes.

    The record is replaced, never mutated. The breakdown toggle is
    presentation state and does not affect scoring.
    """

    def __init__(
        self,
        record: FertilityInput | None = None,
        show_breakdown: bool = False,
    ) -> None:
        """
        Initialize collector.

        Args:
            record: Starting inputs (defaults used if not provided)
            show_breakdown: Whether the per-factor breakdown starts expanded
        """
        self._record = record or FertilityInput()
        self._result = compute_score(self._record)
        self.show_breakdown = show_breakdown

    @property
    def record(self) -> FertilityInput:
        """Current input record."""
        return self._record

    @property
    def result(self) -> ScoreResult:
        """Result for the current input record."""
        return self._result

    def set(self, field: str, value: Any) -> ScoreResult:
        """
        Update one field and recompute.

        Numeric values are clamped to their widget range.

        Args:
            field: FertilityInput field name
            value: New value (converted to the field's type)

        Returns:
            Recomputed ScoreResult

        Raises:
            UnknownFieldError: If field is not an input field
        """
        value = coerce_field_value(field, value)
        if field in NUMERIC_RANGES:
            lo, hi, _step = NUMERIC_RANGES[field]
            bounded = type(value)(clamp(value, lo, hi))
            if bounded != value:
                logger.debug(f"Clamped {field} from {value} to {bounded}")
            value = bounded

        return self.replace(self._record.update(**{field: value}))

    def update(self, **changes: Any) -> ScoreResult:
        """Apply several field changes, recomputing after each."""
        for field, value in changes.items():
            self.set(field, value)
        return self._result

    def replace(self, record: FertilityInput) -> ScoreResult:
        """Swap in a whole record and recompute."""
        self._record = record
        self._result = compute_score(record)
        return self._result

    def reset(self) -> ScoreResult:
        """Restore default inputs."""
        return self.replace(FertilityInput())

    def toggle_breakdown(self) -> bool:
        """Flip the breakdown visibility and return the new state."""
        self.show_breakdown = not self.show_breakdown
        return self.show_breakdown
