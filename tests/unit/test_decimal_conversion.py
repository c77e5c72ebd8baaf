"""
Тесты для модуля Decimal Conversion

Проверяет:
1. Подсчёт значащих знаков после запятой (6 знаков фиксированной записи)
2. Округление half-up и нормализацию результата
3. Знак отрицательных значений
4. NaN / inf / выход за int32
"""

import pytest

from src.core.math.decimal_conversion import (
    DECIMAL_PLACES,
    count_decimal_places,
    decimal_to_parts,
)
from src.core.math.errors import IntegerOverflowError, InvalidFormatError


class TestCountDecimalPlaces:
    """Тесты count_decimal_places."""

    def test_default_precision(self):
        assert DECIMAL_PLACES == 6

    def test_significant_places(self):
        assert count_decimal_places(0.75) == 2
        assert count_decimal_places(0.125) == 3
        assert count_decimal_places(0.1) == 1

    def test_integral_value(self):
        assert count_decimal_places(3.0) == 0

    def test_below_precision(self):
        """1e-7 в 6 знаках — это 0.000000"""
        assert count_decimal_places(1e-7) == 0

    def test_sign_ignored(self):
        assert count_decimal_places(-0.25) == 2


class TestDecimalToParts:
    """Тесты decimal_to_parts."""

    def test_three_quarters(self):
        assert decimal_to_parts(0.75) == (0, 3, 4)

    def test_negative_mixed(self):
        """-2.5 → -25/10 → -3 1/2 (== -3 + 1/2)"""
        assert decimal_to_parts(-2.5) == (-3, 1, 2)

    def test_negative_proper(self):
        assert decimal_to_parts(-0.25) == (0, -1, 4)

    def test_zero(self):
        assert decimal_to_parts(0.0) == (0, 0, 1)
        assert decimal_to_parts(-1e-9) == (0, 0, 1)

    def test_integral(self):
        assert decimal_to_parts(3.0) == (0, 3, 1)

    def test_rounding_half_up(self):
        """0.1234567 → 0.123457"""
        assert decimal_to_parts(0.1234567) == (0, 123457, 1000000)

    def test_repeating_decimal_truncated(self):
        assert decimal_to_parts(0.333333) == (0, 333333, 1000000)

    def test_nan(self):
        with pytest.raises(InvalidFormatError):
            decimal_to_parts(float("nan"))

    def test_infinity(self):
        with pytest.raises(IntegerOverflowError):
            decimal_to_parts(float("inf"))
        with pytest.raises(IntegerOverflowError):
            decimal_to_parts(float("-inf"))

    def test_out_of_int32(self):
        with pytest.raises(IntegerOverflowError):
            decimal_to_parts(3e9)
