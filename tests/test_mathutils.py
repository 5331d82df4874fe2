"""Tests for factorial."""

import math

import pytest

from showcase.exceptions import NegativeInputError
from showcase.mathutils import factorial


class TestFactorial:
    """Test cases for factorial."""

    def test_base_cases(self):
        assert factorial(0) == 1
        assert factorial(1) == 1

    def test_five(self):
        assert factorial(5) == 120

    def test_matches_math_factorial(self):
        for n in range(0, 30):
            assert factorial(n) == math.factorial(n)

    def test_large_input_is_exact(self):
        # Well past both the recursion limit and float precision
        assert factorial(2000) == math.factorial(2000)

    def test_negative_input_raises(self):
        with pytest.raises(NegativeInputError) as exc_info:
            factorial(-1)

        assert exc_info.value.value == -1
        assert "Negative numbers not allowed" in str(exc_info.value)

    @pytest.mark.parametrize("value", [2.0, "5", None, True])
    def test_non_int_raises_type_error(self, value):
        with pytest.raises(TypeError):
            factorial(value)
