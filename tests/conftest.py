"""
Pytest configuration and fixtures for FSP tests.
"""

import pytest

from fsp.core.types import FertilityInput


@pytest.fixture
def default_input() -> FertilityInput:
    """Inputs as shown on first load (should score 39, Green)."""
    return FertilityInput()


@pytest.fixture
def worst_input() -> FertilityInput:
    """Every factor at its lowest-scoring value (should score 0, Black)."""
    return FertilityInput(
        age=50,
        weight=200,
        height=100,  # BMI 200.0
        marriage_years=10,
        lifestyle="Sedentary",
        menstruation="Irregularly/irregular",
        sex_frequency="Once a month",
        diagnosis="Multiple factors",
        ovulation="None",
        stress="Severe",
        sleep="Insomnia",
        diet="Poor",
        substance="Daily",
        family_history="Multiple",
    )


@pytest.fixture
def mixed_input() -> FertilityInput:
    """A middling profile (should score 24, Blue)."""
    return FertilityInput(
        age=34,  # 2
        weight=82,
        height=165,  # BMI 30.1 -> 2
        marriage_years=4,  # 2
        lifestyle="Moderate",  # 1
        menstruation="Regularly/irregular",  # 2
        sex_frequency="Irregular",  # 2
        diagnosis="One factor",  # 2
        ovulation="Mostly",  # 2
        stress="High",  # 1
        sleep="Fair",  # 2
        diet="Mostly balanced",  # 2
        substance="Occasional",  # 2
        family_history="Remote",  # 2
    )


@pytest.fixture
def profile_dict() -> dict:
    """Profile mapping as it would appear in a YAML file."""
    return {
        "age": 38,
        "weight": 58,
        "height": 160,
        "marriageYears": 6,
        "stress": "Moderate",
        "familyHistory": "Close",
    }
