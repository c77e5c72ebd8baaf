"""
Normalization — Приведение дроби к каноническому виду

Модуль приводит тройку (whole, numerator, denominator) к канонической форме:
- denominator > 0
- gcd(|numerator|, denominator) == 1
- нулевое значение хранится как 0 0/1
- знак отрицательного значения несёт whole (если whole != 0), иначе numerator
- при whole != 0 numerator — неотрицательный правильный остаток
- целое значение k хранится как 0 k/1

Семантика тройки (improper numerator):
    whole * denominator + numerator

То есть "-1 1/2" означает -2 + 1/2 == -1/2, а -7/2 в канонической форме
записывается как "-4 1/2". Вне канонической формы оба поля могут нести
знак независимо ("-2 -1/2" == -5/2).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый шаг проверяется на переполнение int32
2. simplify_parts идемпотентна
3. Значение дроби при нормализации не меняется
"""

from src.core.math.overflow_checks import (
    checked_add,
    checked_mul,
    checked_neg,
)

# =============================================================================
# GCD
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель по алгоритму Евклида (деление с остатком).

    Работает с модулями аргументов; gcd(0, 0) == 0.

    Examples:
        >>> gcd(22, 8)
        2
        >>> gcd(-10, 18)
        2
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


# =============================================================================
# IMPROPER / MIXED
# =============================================================================


def improper_numerator(whole: int, numerator: int, denominator: int) -> int:
    """
    Числитель неправильной дроби для тройки (whole, numerator, denominator).

    Args:
        whole: Целая часть
        numerator: Числитель дробной части (может нести свой знак)
        denominator: Знаменатель

    Returns:
        whole * denominator + numerator

    Raises:
        IntegerOverflowError: если произведение или сумма не помещаются в int32

    Examples:
        >>> improper_numerator(1, 1, 2)
        3
        >>> improper_numerator(-1, 1, 2)
        -1
        >>> improper_numerator(-4, 1, 2)
        -7
    """
    if whole == 0:
        return numerator
    return checked_add(checked_mul(whole, denominator), numerator)


def split_improper(numerator: int, denominator: int) -> tuple[int, int, int]:
    """
    Разложение неправильной дроби на (whole, numerator, denominator).

    Усечённое деление и остаток со знаком делимого; сокращение не
    выполняется. Отрицательный знаменатель сначала меняет знак вместе
    с числителем.

    Examples:
        >>> split_improper(4, 2)
        (2, 0, 2)
        >>> split_improper(-7, 2)
        (-3, -1, 2)
        >>> split_improper(1, -2)
        (0, -1, 2)
    """
    if denominator < 0:
        numerator = checked_neg(numerator)
        denominator = checked_neg(denominator)

    quotient = abs(numerator) // denominator
    if numerator < 0:
        quotient = -quotient
    return (quotient, numerator - quotient * denominator, denominator)


# =============================================================================
# SIMPLIFY
# =============================================================================


def simplify_parts(whole: int, numerator: int, denominator: int) -> tuple[int, int, int]:
    """
    Каноническая форма тройки.

    Алгоритм:
        1. denominator == 0 → без изменений (вызывающий код уже отверг это состояние)
        2. improper numerator; ноль → (0, 0, 1)
        3. отрицательный знаменатель → смена знака у обоих
        4. сокращение на gcd; целое значение → (0, k, 1)
        5. выделение целой части усечённым делением
        6. отрицательный остаток при whole != 0 → остаток + denominator,
           whole - 1

    Raises:
        IntegerOverflowError: если improper numerator или смена знака
            выходят за int32

    Examples:
        >>> simplify_parts(0, 22, 8)
        (2, 3, 4)
        >>> simplify_parts(0, -7, 2)
        (-4, 1, 2)
        >>> simplify_parts(0, 10, -18)
        (0, -5, 9)
        >>> simplify_parts(3, 0, 5)
        (0, 3, 1)
    """
    if denominator == 0:
        return (whole, numerator, denominator)

    num = improper_numerator(whole, numerator, denominator)
    if num == 0:
        return (0, 0, 1)

    den = denominator
    if den < 0:
        num = checked_neg(num)
        den = checked_neg(den)

    divisor = gcd(num, den)
    num //= divisor
    den //= divisor

    if den == 1:
        return (0, num, 1)

    whole, num, den = split_improper(num, den)
    if num < 0 and whole != 0:
        num += den
        whole -= 1
    return (whole, num, den)
