"""
Comparison — Сравнение дробей перекрёстным умножением

Сравнение a/b и c/d выполняется через a*d против c*b без предварительного
сокращения операндов. Числители берутся неправильными (improper), поэтому
смешанные и несокращённые дроби сравниваются корректно.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Перекрёстные произведения проверяются на переполнение int32
2. Отрицательные знаменатели компенсируются (оператор применяется к
   произведениям в обратном порядке)
3. Равенство и все четыре отношения используют один примитив
"""

import operator
from typing import Callable

from src.core.math.overflow_checks import checked_mul

FracParts = tuple[int, int]

Relation = Callable[[int, int], bool]


def cross_products(a: FracParts, b: FracParts) -> tuple[int, int]:
    """
    Перекрёстные произведения (aN * bD, bN * aD), ориентированные так, что
    их порядок совпадает с порядком дробей.

    Raises:
        IntegerOverflowError: если любое произведение выходит за int32

    Examples:
        >>> cross_products((1, 2), (2, 3))
        (3, 4)
        >>> cross_products((1, -2), (2, 3))
        (-4, 3)
    """
    a_num, a_den = a
    b_num, b_den = b
    lhs = checked_mul(a_num, b_den)
    rhs = checked_mul(b_num, a_den)
    # aD * bD < 0 → неравенство меняет направление
    if (a_den < 0) != (b_den < 0):
        return (rhs, lhs)
    return (lhs, rhs)


def compare_fractions(a: FracParts, b: FracParts, relation: Relation) -> bool:
    """
    Проверка отношения между дробями.

    Args:
        a: (numerator, denominator) левого операнда
        b: (numerator, denominator) правого операнда
        relation: Оператор над произведениями (operator.lt, operator.eq, ...)

    Examples:
        >>> compare_fractions((2, 4), (1, 2), operator.eq)
        True
        >>> compare_fractions((3, 2), (1, 2), operator.ge)
        True
    """
    lhs, rhs = cross_products(a, b)
    return relation(lhs, rhs)


def compare_sign(a: FracParts, b: FracParts) -> int:
    """
    Трёхзначное сравнение.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if compare_fractions(a, b, operator.lt):
        return -1
    if compare_fractions(a, b, operator.gt):
        return 1
    return 0
