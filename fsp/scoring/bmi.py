"""
Body-mass index derivation.

Formula:
    BMI = weight_kg / (height_cm / 100)^2

Rounded to one decimal place. Exact halves round away from zero, as
fixed-point decimal formatting does, rather than to even.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal

logger = logging.getLogger(__name__)

_ONE_DECIMAL = Decimal("0.1")


def round_one_decimal(value: float) -> float:
    """
    Round to one decimal place, halves away from zero.

    Rounding is applied to the exact binary value of the float, so
    0.25 rounds to 0.3 while 0.15 (stored as 0.1499...) rounds to 0.1.
    """
    return float(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def compute_bmi(weight: float, height: float) -> float:
    """
    Calculate BMI from weight (kg) and height (cm).

    Args:
        weight: Weight in kilograms
        height: Height in centimeters

    Returns:
        BMI rounded to one decimal, or 0 when height is 0
    """
    height_m = height / 100
    if height_m == 0:
        # Zero height yields 0 instead of dividing by zero
        logger.debug("Zero height, returning BMI 0")
        return 0.0

    return round_one_decimal(weight / (height_m * height_m))
