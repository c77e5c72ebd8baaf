"""
Fraction Errors — Типы ошибок и фиксированные сообщения

Ровно три вида ошибок арифметики дробей:
- ZeroDivisorError: нулевой знаменатель или деление на нулевую дробь
- IntegerOverflowError: переполнение 32-битного целого до фиксации результата
- InvalidFormatError: строка не соответствует грамматике дроби

Все ошибки наследуют FracError, а также соответствующее встроенное исключение
(ZeroDivisionError / OverflowError / ValueError), чтобы вызывающий код мог
перехватывать их привычным способом.
"""

from typing import Final

# =============================================================================
# СООБЩЕНИЯ ОБ ОШИБКАХ
# =============================================================================

ZERO_DIVISOR_ERROR: Final[str] = "denominator cannot be zero"

OVERFLOW_ERROR: Final[str] = "integer overflow detected"

INVALID_FORMAT_ERROR: Final[str] = 'accepted forms: "1/2", "25", "3 1/2"'


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FracError(Exception):
    """Базовый класс всех ошибок арифметики дробей."""

    default_message: str = ""

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ZeroDivisorError(FracError, ZeroDivisionError):
    """
    Нулевой знаменатель.

    Возникает в конструкторах, при делении на нулевую дробь и при разборе
    строки вида "1/0".
    """

    default_message = ZERO_DIVISOR_ERROR


class IntegerOverflowError(FracError, OverflowError):
    """
    Переполнение 32-битного целого.

    Возникает до того, как результат операции зафиксирован; операнды
    остаются без изменений.
    """

    default_message = OVERFLOW_ERROR


class InvalidFormatError(FracError, ValueError):
    """Строка не соответствует грамматике `N`, `N/D`, `W N/D`."""

    default_message = INVALID_FORMAT_ERROR
