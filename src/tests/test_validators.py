"""Tests for command line input validators."""

import pytest

from src.utils.constants import ERROR_INVALID_ROUND, ERROR_INVALID_VALUE
from src.utils.validators import validate_numeric_value, validate_round_places


class TestValidateNumericValue:
    """Test validation of the value to convert."""

    @pytest.mark.parametrize("value", ["0", "12", "-3.5", "+7", "+7.", ".5", "-.25", "007"])
    def test_valid_numbers(self, value):
        """Test plain decimal numbers are accepted."""
        assert validate_numeric_value(value) == (True, "")

    @pytest.mark.parametrize(
        "value",
        [None, "", "-", "+", ".", "1.2.3", "1e3", "nan", "inf", "12abc", " 12", "1,000", "--1"],
    )
    def test_invalid_numbers(self, value):
        """Test anything other than sign, digits and one point is rejected."""
        is_valid, error = validate_numeric_value(value)
        assert is_valid is False
        assert error == ERROR_INVALID_VALUE


class TestValidateRoundPlaces:
    """Test validation of --round."""

    @pytest.mark.parametrize("value", ["0", "2", "15"])
    def test_valid_places(self, value):
        """Test non-negative integers are accepted."""
        assert validate_round_places(value) == (True, "")

    @pytest.mark.parametrize("value", [None, "", "-1", "2.5", "two", "+3"])
    def test_invalid_places(self, value):
        """Test negative, fractional and non-numeric places are rejected."""
        is_valid, error = validate_round_places(value)
        assert is_valid is False
        assert error == ERROR_INVALID_ROUND
