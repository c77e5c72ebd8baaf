"""
Arithmetic — Формулы арифметики дробей с проверкой переполнения

Функции работают с парами (numerator, denominator) неправильных дробей и
возвращают новую пару без сокращения. Все проверки переполнения выполняются
ДО вычисления результата, поэтому вызывающий код может атомарно
фиксировать результат (compound assignment оставляет операнд без изменений
при ошибке).

ФОРМУЛЫ:
    a + b = (aN * bD + bN * aD) / (aD * bD)
    a - b = (aN * bD - bN * aD) / (aD * bD)
    a * b = (aN * bN) / (aD * bD)
    a / b = (aN * bD) / (aD * bN)

    a ± n = (aN ± aD * n) / aD
    a * n = (aN * n) / aD
    a / n = aN / (aD * n)
"""

from src.core.math.errors import ZeroDivisorError
from src.core.math.overflow_checks import (
    checked_add,
    checked_mul,
    checked_sub,
)

FracParts = tuple[int, int]


# =============================================================================
# ДРОБЬ С ДРОБЬЮ
# =============================================================================


def add_fractions(a: FracParts, b: FracParts) -> FracParts:
    """
    Сумма двух дробей.

    Raises:
        IntegerOverflowError: при переполнении любого из произведений или суммы

    Examples:
        >>> add_fractions((5, 4), (3, 2))
        (22, 8)
    """
    a_num, a_den = a
    b_num, b_den = b
    left = checked_mul(a_num, b_den)
    right = checked_mul(b_num, a_den)
    den = checked_mul(a_den, b_den)
    return (checked_add(left, right), den)


def subtract_fractions(a: FracParts, b: FracParts) -> FracParts:
    """
    Разность двух дробей.

    Examples:
        >>> subtract_fractions((1, 2), (1, 3))
        (1, 6)
    """
    a_num, a_den = a
    b_num, b_den = b
    left = checked_mul(a_num, b_den)
    right = checked_mul(b_num, a_den)
    den = checked_mul(a_den, b_den)
    return (checked_sub(left, right), den)


def multiply_fractions(a: FracParts, b: FracParts) -> FracParts:
    """
    Произведение двух дробей.

    Examples:
        >>> multiply_fractions((2, 3), (3, 4))
        (6, 12)
    """
    a_num, a_den = a
    b_num, b_den = b
    return (checked_mul(a_num, b_num), checked_mul(a_den, b_den))


def divide_fractions(a: FracParts, b: FracParts) -> FracParts:
    """
    Частное двух дробей.

    Raises:
        ZeroDivisorError: если делитель равен нулю (или aD == 0)
        IntegerOverflowError: при переполнении произведений

    Examples:
        >>> divide_fractions((5, 2), (9, 2))
        (10, 18)
    """
    a_num, a_den = a
    b_num, b_den = b
    if b_num == 0 or a_den == 0:
        raise ZeroDivisorError()
    return (checked_mul(a_num, b_den), checked_mul(a_den, b_num))


# =============================================================================
# ДРОБЬ С ЦЕЛЫМ (fast path)
# =============================================================================


def add_integer(a: FracParts, value: int) -> FracParts:
    """
    a + value без материализации целого как дроби.

    Examples:
        >>> add_integer((1, 2), 3)
        (7, 2)
    """
    a_num, a_den = a
    return (checked_add(a_num, checked_mul(a_den, value)), a_den)


def subtract_integer(a: FracParts, value: int) -> FracParts:
    """
    a - value.

    Examples:
        >>> subtract_integer((1, 2), 1)
        (-1, 2)
    """
    a_num, a_den = a
    return (checked_sub(a_num, checked_mul(a_den, value)), a_den)


def multiply_integer(a: FracParts, value: int) -> FracParts:
    """a * value."""
    a_num, a_den = a
    return (checked_mul(a_num, value), a_den)


def divide_integer(a: FracParts, value: int) -> FracParts:
    """
    a / value.

    Raises:
        ZeroDivisorError: если value == 0

    Examples:
        >>> divide_integer((3, 4), 2)
        (3, 8)
    """
    a_num, a_den = a
    if value == 0:
        raise ZeroDivisorError()
    return (a_num, checked_mul(a_den, value))
