"""Tests for BMI derivation."""

import pytest

from fsp.scoring.bmi import compute_bmi, round_one_decimal


class TestComputeBMI:
    """Tests for compute_bmi."""

    def test_default_measurements(self):
        """70 kg at 170 cm is 24.2."""
        assert compute_bmi(70, 170) == 24.2

    def test_rounds_to_one_decimal(self):
        """Test one-decimal rounding of non-terminating values."""
        assert compute_bmi(60, 150) == 26.7  # 26.666...
        assert compute_bmi(82, 165) == 30.1  # 30.119...

    def test_exact_value(self):
        """Test a value that needs no rounding."""
        assert compute_bmi(100, 200) == 25.0

    def test_zero_height_returns_zero(self):
        """Zero height must not raise."""
        assert compute_bmi(70, 0) == 0
        assert compute_bmi(0, 0) == 0

    def test_zero_weight(self):
        """Zero weight is not guarded; it simply yields 0."""
        assert compute_bmi(0, 170) == 0.0

    @pytest.mark.parametrize(
        "weight,height",
        [(30, 100), (200, 220), (55.5, 162), (120, 185)],
    )
    def test_pure_and_repeatable(self, weight, height):
        """Same inputs always give bit-identical output."""
        assert compute_bmi(weight, height) == compute_bmi(weight, height)


class TestRoundOneDecimal:
    """Tests for half-away-from-zero rounding."""

    def test_exact_halves_round_up(self):
        """Exact binary halves round away from zero, not to even."""
        assert round_one_decimal(0.25) == 0.3
        assert round_one_decimal(2.25) == 2.3
        assert round_one_decimal(-2.25) == -2.3

    def test_inexact_halves_follow_binary_value(self):
        """0.15 is stored just below the half and rounds down."""
        assert round_one_decimal(0.15) == 0.1

    def test_plain_values(self):
        assert round_one_decimal(24.2214) == 24.2
        assert round_one_decimal(24.26) == 24.3
