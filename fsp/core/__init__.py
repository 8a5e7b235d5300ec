"""Core types, constants, configuration, and exceptions for FSP."""

from fsp.core.config import (
    Settings,
    get_settings,
    load_profile,
)
from fsp.core.constants import (
    BAND_THRESHOLDS,
    DEFAULT_CATEGORICAL_SCORE,
    FACTOR_NAMES,
    FIELD_OPTIONS,
    MAX_TOTAL,
    NUMERIC_RANGES,
)
from fsp.core.exceptions import (
    ConfigurationError,
    FSPError,
    UnknownFieldError,
)
from fsp.core.types import (
    Band,
    FactorScore,
    FertilityInput,
    ScoreResult,
)

__all__ = [
    # Types
    "Band",
    "FactorScore",
    "FertilityInput",
    "ScoreResult",
    # Constants
    "BAND_THRESHOLDS",
    "DEFAULT_CATEGORICAL_SCORE",
    "FACTOR_NAMES",
    "FIELD_OPTIONS",
    "MAX_TOTAL",
    "NUMERIC_RANGES",
    # Config
    "Settings",
    "get_settings",
    "load_profile",
    # Exceptions
    "ConfigurationError",
    "FSPError",
    "UnknownFieldError",
]
