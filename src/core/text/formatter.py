"""
Fraction Formatter — Текстовое представление дроби

Формат: "W N/D" при whole != 0, иначе "N/D". Неявного сокращения нет:
для канонического вывода дробь нужно предварительно нормализовать.
"""

from typing import Protocol


class FracLike(Protocol):
    """Любой объект с полями whole / numerator / denominator."""

    whole: int
    numerator: int
    denominator: int


def format_parts(whole: int, numerator: int, denominator: int) -> str:
    """
    Текст для тройки.

    Examples:
        >>> format_parts(2, 3, 4)
        '2 3/4'
        >>> format_parts(0, -5, 9)
        '-5/9'
        >>> format_parts(2, 0, 2)
        '2 0/2'
    """
    if whole != 0:
        return f"{whole} {numerator}/{denominator}"
    return f"{numerator}/{denominator}"


def format_fraction(frac: FracLike) -> str:
    """Текст для дроби (см. format_parts)."""
    return format_parts(frac.whole, frac.numerator, frac.denominator)
