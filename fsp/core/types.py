"""
Core type definitions for FSP.

Defines the band enum, the immutable input record, and the result
dataclasses produced by the scoring engine.
"""

import math
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any

from fsp.core.constants import (
    FIELD_ALIASES,
    FIELD_OPTIONS,
    MAX_TOTAL,
    NUMERIC_RANGES,
)
from fsp.core.exceptions import UnknownFieldError


class Band(str, Enum):
    """
    FSP interpretation bands.

    Band Thresholds:
        - GREEN (30-39): Favourable profile
        - BLUE (20-29): Good profile
        - ORANGE (10-19): Several unfavourable factors
        - RED (5-9): Many unfavourable factors
        - BLACK (<5): Nearly all factors unfavourable

    Note: Higher total = more favourable.
    """

    GREEN = "Green"
    BLUE = "Blue"
    ORANGE = "Orange"
    RED = "Red"
    BLACK = "Black"

    @classmethod
    def from_total(cls, total: int) -> "Band":
        """
        Convert a total score to its band.

        Thresholds are inclusive lower bounds checked highest first.

        Args:
            total: Sum of sub-scores in [0, 39]

        Returns:
            Corresponding band
        """
        if total >= 30:
            return cls.GREEN
        elif total >= 20:
            return cls.BLUE
        elif total >= 10:
            return cls.ORANGE
        elif total >= 5:
            return cls.RED
        else:
            return cls.BLACK

    @property
    def description(self) -> str:
        """Human-readable description of the band."""
        descriptions = {
            Band.GREEN: "Favourable profile",
            Band.BLUE: "Good profile",
            Band.ORANGE: "Several unfavourable factors",
            Band.RED: "Many unfavourable factors",
            Band.BLACK: "Nearly all factors unfavourable",
        }
        return descriptions[self]

    @property
    def range_label(self) -> str:
        """Total range covered by the band, for display."""
        labels = {
            Band.GREEN: "30–39",
            Band.BLUE: "20–29",
            Band.ORANGE: "10–19",
            Band.RED: "5–9",
            Band.BLACK: "<5",
        }
        return labels[self]

    @property
    def color(self) -> str:
        """Badge colour used by the presenter."""
        colors = {
            Band.GREEN: "#22c55e",
            Band.BLUE: "#3b82f6",
            Band.ORANGE: "#f97316",
            Band.RED: "#dc2626",
            Band.BLACK: "#111827",
        }
        return colors[self]


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]."""
    return max(lo, min(hi, value))


def coerce_field_value(name: str, value: Any) -> Any:
    """
    Convert a raw value (e.g. a CLI string or YAML scalar) to the field's type.

    Integer fields (age, marriage_years) become int and measurements become
    float. Categorical labels pass through unchanged: they are not checked
    against the option lists, and unknown labels (including a YAML null)
    score the neutral default.

    Raises:
        UnknownFieldError: If name is not an input field
        ValueError: If a numeric field cannot be parsed or is not finite
    """
    if name in NUMERIC_RANGES:
        try:
            number = float(value)
        except TypeError as e:
            raise ValueError(f"{name} must be a number, got {value!r}") from e
        if not math.isfinite(number):
            raise ValueError(f"{name} must be a finite number, got {value!r}")
        return int(number) if name in ("age", "marriage_years") else number
    if name in FIELD_OPTIONS:
        return value
    raise UnknownFieldError(f"Unknown input field: {name}", field=name)


@dataclass(frozen=True)
class FertilityInput:
    """
    Immutable snapshot of every calculator input.

    Defaults are the values the form shows on first load. Updates never
    mutate a record; they return a fresh one via update().
    """

    age: int = 30
    weight: float = 70.0  # kg
    height: float = 170.0  # cm
    marriage_years: int = 2
    lifestyle: str = "Active"
    menstruation: str = "Regular"
    sex_frequency: str = "Regular"
    diagnosis: str = "No factor"
    ovulation: str = "Always"
    stress: str = "Low"
    sleep: str = "Good"
    diet: str = "Balanced"
    substance: str = "None"
    family_history: str = "No history"

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of all input fields in declaration order."""
        return tuple(f.name for f in fields(cls))

    def update(self, **changes: Any) -> "FertilityInput":
        """
        Return a copy with the given fields replaced.

        Raises:
            UnknownFieldError: If any key is not an input field
        """
        valid = set(self.field_names())
        for name in changes:
            if name not in valid:
                raise UnknownFieldError(f"Unknown input field: {name}", field=name)
        return replace(self, **changes)

    def clamped(self) -> "FertilityInput":
        """Return a copy with numeric fields clamped to their widget ranges."""
        changes = {}
        for name, (lo, hi, _step) in NUMERIC_RANGES.items():
            current = getattr(self, name)
            bounded = clamp(current, lo, hi)
            if bounded != current:
                changes[name] = type(current)(bounded)
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {name: getattr(self, name) for name in self.field_names()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FertilityInput":
        """
        Build a record from a mapping, filling missing fields with defaults.

        Accepts snake_case field names and the camelCase aliases
        marriageYears, sexFrequency, and familyHistory.

        Raises:
            UnknownFieldError: If any key is not an input field
        """
        values = {}
        for key, value in data.items():
            name = FIELD_ALIASES.get(key, key)
            values[name] = coerce_field_value(name, value)
        return cls().update(**values)


@dataclass(frozen=True)
class FactorScore:
    """
    Sub-score for one factor.

    value is whatever was scored: the raw input, or the derived BMI for
    the bmi factor.
    """

    name: str
    value: Any
    score: int  # 0-3


@dataclass(frozen=True)
class ScoreResult:
    """
    Result of scoring a single input record.

    This is the primary output of the FSP engine. It is recomputed from
    scratch on every input change and never mutated.
    """

    bmi: float
    components: tuple[FactorScore, ...]  # canonical FACTOR_NAMES order
    total: int  # sum of component scores, in [0, 39]
    band: Band

    @property
    def parts(self) -> dict[str, int]:
        """Score record: factor name -> sub-score."""
        return {c.name: c.score for c in self.components}

    @property
    def max_total(self) -> int:
        """Highest achievable total."""
        return MAX_TOTAL

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "bmi": self.bmi,
            "parts": self.parts,
            "total": self.total,
            "band": self.band.value,
        }
