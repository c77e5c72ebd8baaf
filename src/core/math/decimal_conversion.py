"""
Decimal Conversion — Приближение float дробью

Знаменатель берётся как 10**p, где p — число значащих знаков после запятой
в фиксированной десятичной записи (DECIMAL_PLACES знаков, хвостовые нули
отбрасываются). Числитель — округлённое |value| * 10**p с восстановленным
знаком. Результат всегда нормализуется.

Examples:
    0.75   → "0.750000" → p=2 → 75/100 → 3/4
    -2.5   → "2.500000" → p=1 → -25/10 → -3 1/2
    1e-7   → "0.000000" → p=0 → 0/1
"""

import math
from typing import Final

from src.core.math.errors import (
    IntegerOverflowError,
    InvalidFormatError,
    ZeroDivisorError,
)
from src.core.math.normalization import simplify_parts
from src.core.math.overflow_checks import is_int32

# Точность фиксированной десятичной записи
DECIMAL_PLACES: Final[int] = 6


def count_decimal_places(value: float, places: int = DECIMAL_PLACES) -> int:
    """
    Число значащих знаков после запятой в фиксированной записи |value|.

    Examples:
        >>> count_decimal_places(0.75)
        2
        >>> count_decimal_places(3.0)
        0
    """
    text = f"{abs(value):.{places}f}"
    _, _, fraction_digits = text.partition(".")
    return len(fraction_digits.rstrip("0"))


def decimal_to_parts(value: float, places: int = DECIMAL_PLACES) -> tuple[int, int, int]:
    """
    Каноническая тройка (whole, numerator, denominator) для float.

    Args:
        value: Конечное число с плавающей точкой
        places: Число знаков фиксированной записи (default: DECIMAL_PLACES)

    Returns:
        Нормализованная тройка

    Raises:
        InvalidFormatError: если value — NaN
        IntegerOverflowError: если value бесконечно или не помещается в int32
        ZeroDivisorError: если знаменатель вычислился в 0
    """
    if math.isnan(value):
        raise InvalidFormatError(f"cannot convert NaN to a fraction; {InvalidFormatError.default_message}")
    if math.isinf(value):
        raise IntegerOverflowError()

    magnitude = abs(value)
    denominator = 10 ** count_decimal_places(magnitude, places)
    if denominator == 0:
        raise ZeroDivisorError()

    # Округление half-up
    numerator = math.floor(magnitude * denominator + 0.5)
    if value < 0:
        numerator = -numerator

    if not is_int32(numerator) or not is_int32(denominator):
        raise IntegerOverflowError()

    return simplify_parts(0, numerator, denominator)
