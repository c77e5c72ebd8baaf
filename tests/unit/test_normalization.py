"""
Тесты для модуля Normalization

Проверяемые инварианты:
1. denominator > 0 после нормализации
2. gcd(numerator, denominator) == 1
3. Нулевое значение → (0, 0, 1)
4. Знак на whole при whole != 0, иначе на numerator; остаток неотрицателен
5. Идемпотентность simplify_parts
6. Значение дроби не меняется
"""

from fractions import Fraction

import pytest

from src.core.math.errors import IntegerOverflowError
from src.core.math.normalization import (
    gcd,
    improper_numerator,
    simplify_parts,
    split_improper,
)
from src.core.math.overflow_checks import INT32_MAX, INT32_MIN


def _value(parts: tuple[int, int, int]) -> Fraction:
    whole, numerator, denominator = parts
    return Fraction(improper_numerator(whole, numerator, denominator), denominator)


# =============================================================================
# ТЕСТЫ: GCD
# =============================================================================


class TestGcd:
    """Тесты gcd."""

    def test_basic(self):
        assert gcd(22, 8) == 2
        assert gcd(17, 5) == 1
        assert gcd(12, 18) == 6

    def test_signs_ignored(self):
        assert gcd(-10, 18) == 2
        assert gcd(10, -18) == 2

    def test_zero_operand(self):
        assert gcd(0, 5) == 5
        assert gcd(5, 0) == 5


# =============================================================================
# ТЕСТЫ: Improper / Split
# =============================================================================


class TestImproperNumerator:
    """Тесты improper_numerator: whole * denominator + numerator."""

    def test_proper(self):
        assert improper_numerator(0, -1, 2) == -1
        assert improper_numerator(0, 3, 4) == 3

    def test_positive_mixed(self):
        assert improper_numerator(1, 1, 2) == 3
        assert improper_numerator(2, 0, 2) == 4

    def test_negative_whole(self):
        """-1 1/2 == -1 + 1/2 == -1/2"""
        assert improper_numerator(-1, 1, 2) == -1
        assert improper_numerator(-4, 1, 2) == -7

    def test_both_fields_negative(self):
        assert improper_numerator(-2, -1, 2) == -5

    def test_overflow(self):
        with pytest.raises(IntegerOverflowError):
            improper_numerator(INT32_MAX, 1, 2)


class TestSplitImproper:
    """Тесты split_improper: усечённое деление, остаток со знаком делимого."""

    def test_exact_multiple_keeps_denominator(self):
        assert split_improper(4, 2) == (2, 0, 2)

    def test_negative(self):
        assert split_improper(-7, 2) == (-3, -1, 2)
        assert split_improper(-4, 2) == (-2, 0, 2)

    def test_proper_fraction(self):
        assert split_improper(3, 4) == (0, 3, 4)

    def test_negative_denominator(self):
        assert split_improper(1, -2) == (0, -1, 2)
        assert split_improper(-3, -2) == (1, 1, 2)


# =============================================================================
# ТЕСТЫ: simplify_parts
# =============================================================================


class TestSimplifyParts:
    """Тесты simplify_parts."""

    def test_fold_and_reduce(self):
        assert simplify_parts(0, 22, 8) == (2, 3, 4)

    def test_negative_denominator(self):
        assert simplify_parts(0, 10, -18) == (0, -5, 9)

    def test_integral_value(self):
        """Целое значение хранится как 0 k/1"""
        assert simplify_parts(0, 4, 2) == (0, 2, 1)
        assert simplify_parts(3, 0, 5) == (0, 3, 1)

    def test_zero_value(self):
        assert simplify_parts(0, 0, -7) == (0, 0, 1)
        assert simplify_parts(0, 0, 5) == (0, 0, 1)

    def test_negative_improper_folds_down(self):
        """-7/2 → -4 1/2: остаток сдвигается в положительный"""
        assert simplify_parts(0, -7, 2) == (-4, 1, 2)
        assert simplify_parts(0, -3, 2) == (-2, 1, 2)

    def test_negative_proper_keeps_sign_on_numerator(self):
        assert simplify_parts(0, -1, 2) == (0, -1, 2)

    def test_negative_mixed_reduced(self):
        """-1 2/4 == -1/2"""
        assert simplify_parts(-1, 2, 4) == (0, -1, 2)

    def test_mixed_with_negative_numerator(self):
        """-2 -1/2 == -5/2"""
        assert simplify_parts(-2, -1, 2) == (-3, 1, 2)

    def test_zero_denominator_is_noop(self):
        assert simplify_parts(5, 1, 0) == (5, 1, 0)

    def test_overflow_on_sign_flip(self):
        with pytest.raises(IntegerOverflowError):
            simplify_parts(0, INT32_MIN, -1)

    def test_canonical_form_grid(self):
        """Каноническая форма для сетки значений."""
        for n in range(-12, 13):
            for d in range(-6, 7):
                if d == 0:
                    continue
                whole, numerator, denominator = simplify_parts(0, n, d)
                assert denominator > 0
                if numerator == 0:
                    assert (whole, denominator) == (0, 1)
                assert gcd(numerator, denominator) == 1
                if whole != 0:
                    assert 0 < numerator < denominator
                assert _value((whole, numerator, denominator)) == Fraction(n, d)

    def test_idempotent(self):
        samples = [(0, 22, 8), (0, -7, 2), (1, 3, 2), (-2, 5, 3), (-2, -1, 2), (0, 9, -12), (4, 0, 7)]
        for parts in samples:
            once = simplify_parts(*parts)
            assert simplify_parts(*once) == once
            assert _value(once) == _value(parts)
