"""
Overflow Checks — Проверки переполнения 32-битной арифметики

Модуль эмулирует фиксированную ширину знакового 32-битного целого поверх
целых Python произвольной точности:
- Предикаты will_*_overflow: чистые функции без side effects и без исключений
- checked_* helpers: выполняют операцию или поднимают IntegerOverflowError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни один результат за пределами [INT32_MIN, INT32_MAX] не возвращается
2. INT32_MIN * -1 всегда считается переполнением
3. Предикаты не бросают исключений, решение принимает вызывающий код
"""

from typing import Final

from src.core.math.errors import IntegerOverflowError

# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНА
# =============================================================================

INT32_MIN: Final[int] = -(2**31)

INT32_MAX: Final[int] = 2**31 - 1


def is_int32(value: int) -> bool:
    """
    Проверка, что значение помещается в знаковое 32-битное целое.

    Examples:
        >>> is_int32(2**31 - 1)
        True
        >>> is_int32(2**31)
        False
    """
    return INT32_MIN <= value <= INT32_MAX


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def will_addition_overflow(a: int, b: int) -> bool:
    """
    Переполнит ли a + b 32-битный диапазон.

    Examples:
        >>> will_addition_overflow(INT32_MAX, 1)
        True
        >>> will_addition_overflow(INT32_MAX, -1)
        False
    """
    if b > 0 and a > INT32_MAX - b:
        return True
    if b < 0 and a < INT32_MIN - b:
        return True
    return False


def will_subtraction_overflow(a: int, b: int) -> bool:
    """
    Переполнит ли a - b 32-битный диапазон.

    Examples:
        >>> will_subtraction_overflow(INT32_MIN, 1)
        True
        >>> will_subtraction_overflow(0, INT32_MIN)
        True
    """
    if b < 0 and a > INT32_MAX + b:
        return True
    if b > 0 and a < INT32_MIN + b:
        return True
    return False


def will_multiplication_overflow(a: int, b: int) -> bool:
    """
    Переполнит ли a * b 32-битный диапазон.

    Отдельно отмечается частный случай дополнительного кода:
    INT32_MIN * -1 не представимо.

    Examples:
        >>> will_multiplication_overflow(INT32_MIN, -1)
        True
        >>> will_multiplication_overflow(46341, 46341)
        True
        >>> will_multiplication_overflow(46340, 46340)
        False
    """
    if a == 0 or b == 0:
        return False
    if (a == -1 and b == INT32_MIN) or (b == -1 and a == INT32_MIN):
        return True
    return not is_int32(a * b)


# =============================================================================
# CHECKED HELPERS
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """a + b или IntegerOverflowError."""
    if will_addition_overflow(a, b):
        raise IntegerOverflowError()
    return a + b


def checked_sub(a: int, b: int) -> int:
    """a - b или IntegerOverflowError."""
    if will_subtraction_overflow(a, b):
        raise IntegerOverflowError()
    return a - b


def checked_mul(a: int, b: int) -> int:
    """a * b или IntegerOverflowError."""
    if will_multiplication_overflow(a, b):
        raise IntegerOverflowError()
    return a * b


def checked_neg(a: int) -> int:
    """-a или IntegerOverflowError (для INT32_MIN)."""
    return checked_mul(a, -1)


def require_int32(value: int) -> int:
    """
    Валидация, что value уже находится в 32-битном диапазоне.

    Raises:
        IntegerOverflowError: если значение не помещается в int32
    """
    if not is_int32(value):
        raise IntegerOverflowError()
    return value
