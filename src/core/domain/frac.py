"""
Frac — Рациональное число фиксированной ширины

Value-объект (whole, numerator, denominator) со знаковыми 32-битными полями.
Pydantic модель: поля валидируются при создании и сериализуются через
model_dump() / model_dump_json().

Семантика тройки: значение (whole * denominator + numerator) / denominator,
то есть "-1 1/2" == -1/2, а -7/2 в канонической форме — "-4 1/2"
(см. src.core.math.normalization.improper_numerator).

Операции:
- Арифметика + - * / с Frac, int, float и строкой (в т.ч. reflected формы)
- Compound assignment += -= *= /= — атомарно: при ошибке операнд не меняется
- Сравнения == != < <= > >= перекрёстным умножением без сокращения
- increment / decrement (pre) и post_increment / post_decrement (post):
  шаг на одну долю 1/denominator
- simplify() / simplified(), to_improper(), reciprocal(), float(), int()

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator != 0 для любого сконструированного значения
2. Все поля в диапазоне int32; переполнение → IntegerOverflowError до мутации
3. Нормализация выполняется только явно (simplify=True или simplify())
4. Копия независима от оригинала
"""

import operator
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from src.core.math.arithmetic import (
    FracParts,
    add_fractions,
    add_integer,
    divide_fractions,
    divide_integer,
    multiply_fractions,
    multiply_integer,
    subtract_fractions,
    subtract_integer,
)
from src.core.math.comparison import Relation, compare_fractions
from src.core.math.decimal_conversion import decimal_to_parts
from src.core.math.errors import ZERO_DIVISOR_ERROR, FracError, ZeroDivisorError
from src.core.math.normalization import (
    improper_numerator,
    simplify_parts,
    split_improper,
)
from src.core.math.overflow_checks import (
    INT32_MAX,
    INT32_MIN,
    checked_add,
    checked_neg,
    require_int32,
)
from src.core.text.formatter import format_fraction
from src.core.text.parser import parse_fraction_parts

Operand = Union["Frac", int, float, str]

FracTriple = tuple[int, int, int]

_FIELDS = ("whole", "numerator", "denominator")


# =============================================================================
# FRAC MODEL
# =============================================================================


class Frac(BaseModel):
    """
    Дробь (возможно смешанная) с проверкой переполнения.

    Конструкторы:
        Frac()                          → 0/1
        Frac(n)                         → n/1
        Frac(n, d, simplify=False)      → n/d
        Frac(w, n, d, simplify=False)   → w n/d
        Frac(0.75)                      → 3/4 (всегда нормализуется)
        Frac("3 1/2", simplify=False)   → разбор строки
        Frac(other)                     → копия без нормализации
        Frac(whole=.., numerator=.., denominator=..)

    Raises:
        ZeroDivisorError: нулевой знаменатель
        IntegerOverflowError: поле вне int32
        InvalidFormatError: строка не соответствует грамматике
        TypeError: неподдерживаемые аргументы
    """

    whole: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="Целая часть")
    numerator: int = Field(0, ge=INT32_MIN, le=INT32_MAX, description="Числитель")
    denominator: int = Field(1, ge=INT32_MIN, le=INT32_MAX, description="Знаменатель (!= 0)")

    model_config = {"extra": "forbid"}

    def __init__(self, *args: Any, simplify: bool = False, **data: Any):
        if args and data:
            raise TypeError("Frac accepts either positional arguments or field keywords, not both")

        whole, numerator, denominator = _parts_from_fields(data) if data else _parts_from_args(args)

        if denominator == 0:
            raise ZeroDivisorError()
        for value in (whole, numerator, denominator):
            require_int32(value)

        if simplify:
            whole, numerator, denominator = simplify_parts(whole, numerator, denominator)

        super().__init__(whole=whole, numerator=numerator, denominator=denominator)

    @field_validator("denominator")
    @classmethod
    def validate_denominator_nonzero(cls, v: int) -> int:
        """Знаменатель не может быть нулём (путь model_validate)."""
        if v == 0:
            raise ValueError(ZERO_DIVISOR_ERROR)
        return v

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Frac":
        """
        Восстановление из model_dump() / JSON-словаря.

        Проходит те же проверки, что и конструкторы.
        """
        return cls(**data)

    # -------------------------------------------------------------------------
    # internal
    # -------------------------------------------------------------------------

    def _improper(self) -> FracParts:
        """(improper numerator, denominator) — проверено на переполнение."""
        return (improper_numerator(self.whole, self.numerator, self.denominator), self.denominator)

    def _commit(self, parts: FracTriple) -> None:
        # Вызывается только после всех проверок
        self.whole, self.numerator, self.denominator = parts

    def _parts(self) -> FracTriple:
        return (self.whole, self.numerator, self.denominator)

    # -------------------------------------------------------------------------
    # нормализация и конверсии
    # -------------------------------------------------------------------------

    def simplify(self) -> None:
        """Приведение к канонической форме на месте."""
        self._commit(simplify_parts(*self._parts()))

    def simplified(self) -> "Frac":
        """Новая дробь в канонической форме; исходная не меняется."""
        return Frac(*self._parts(), simplify=True)

    def to_improper(self) -> "Frac":
        """
        Неправильная дробь с whole == 0.

        Examples:
            >>> str(Frac(1, 2, 3).to_improper())
            '5/3'
        """
        numerator, denominator = self._improper()
        return Frac(numerator, denominator)

    def reciprocal(self) -> "Frac":
        """
        Обратная дробь.

        Raises:
            ZeroDivisorError: для нулевого значения
        """
        numerator, denominator = self._improper()
        if numerator == 0:
            raise ZeroDivisorError()
        return Frac(denominator, numerator)

    def to_float(self) -> float:
        """Значение как float."""
        numerator, denominator = self._improper()
        return numerator / denominator

    def assign(self, other: Operand) -> None:
        """
        Замена всех полей значением other (Frac, int, float или строка).

        При ошибке конверсии текущее значение сохраняется.
        """
        self._commit(as_frac(other)._parts())

    # -------------------------------------------------------------------------
    # increment / decrement
    # -------------------------------------------------------------------------

    def _step(self, delta: int) -> None:
        if self.whole != 0:
            numerator = improper_numerator(self.whole, self.numerator, self.denominator)
            numerator = checked_add(numerator, delta)
            self._commit(split_improper(numerator, self.denominator))
        else:
            numerator = checked_add(self.numerator, delta)
            self._commit((0, numerator, self.denominator))

    def increment(self) -> "Frac":
        """
        Pre-increment: numerator + 1 (шаг 1/denominator), возвращает self.

        Examples:
            >>> str(Frac(1, 1, 2).increment())
            '2 0/2'
        """
        self._step(1)
        return self

    def decrement(self) -> "Frac":
        """Pre-decrement: numerator - 1, возвращает self."""
        self._step(-1)
        return self

    def post_increment(self) -> "Frac":
        """Post-increment: мутирует self, возвращает снимок до изменения."""
        snapshot = self.model_copy()
        self._step(1)
        return snapshot

    def post_decrement(self) -> "Frac":
        """Post-decrement: мутирует self, возвращает снимок до изменения."""
        snapshot = self.model_copy()
        self._step(-1)
        return snapshot

    # -------------------------------------------------------------------------
    # арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Operand) -> "Frac":
        if _is_integer(other):
            return _from_parts(add_integer(self._improper(), other))
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _from_parts(add_fractions(self._improper(), rhs._improper()))

    def __sub__(self, other: Operand) -> "Frac":
        if _is_integer(other):
            return _from_parts(subtract_integer(self._improper(), other))
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _from_parts(subtract_fractions(self._improper(), rhs._improper()))

    def __mul__(self, other: Operand) -> "Frac":
        if _is_integer(other):
            return _from_parts(multiply_integer(self._improper(), other))
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _from_parts(multiply_fractions(self._improper(), rhs._improper()))

    def __truediv__(self, other: Operand) -> "Frac":
        if _is_integer(other):
            return _from_parts(divide_integer(self._improper(), other))
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _from_parts(divide_fractions(self._improper(), rhs._improper()))

    # reflected: примитив → Frac, затем обычный оператор Frac с Frac

    def __radd__(self, other: Operand) -> "Frac":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__add__(self)

    def __rsub__(self, other: Operand) -> "Frac":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__sub__(self)

    def __rmul__(self, other: Operand) -> "Frac":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__mul__(self)

    def __rtruediv__(self, other: Operand) -> "Frac":
        lhs = _coerce(other)
        return NotImplemented if lhs is None else lhs.__truediv__(self)

    # compound assignment: результат вычисляется полностью до фиксации

    def __iadd__(self, other: Operand) -> "Frac":
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        self._commit(result._parts())
        return self

    def __isub__(self, other: Operand) -> "Frac":
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        self._commit(result._parts())
        return self

    def __imul__(self, other: Operand) -> "Frac":
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        self._commit(result._parts())
        return self

    def __itruediv__(self, other: Operand) -> "Frac":
        result = self.__truediv__(other)
        if result is NotImplemented:
            return NotImplemented
        self._commit(result._parts())
        return self

    # unary

    def __neg__(self) -> "Frac":
        if self.whole != 0:
            return Frac(checked_neg(self.whole), self.numerator, self.denominator)
        return Frac(checked_neg(self.numerator), self.denominator)

    def __pos__(self) -> "Frac":
        return Frac(self)

    def __abs__(self) -> "Frac":
        if self >= 0:
            return Frac(self)
        numerator, denominator = self._improper()
        return Frac(checked_neg(numerator), denominator)

    # -------------------------------------------------------------------------
    # сравнения
    # -------------------------------------------------------------------------

    def _relate(self, other: Operand, relation: Relation, strict: bool = True) -> bool:
        try:
            rhs = _coerce(other)
        except FracError:
            # == и != с нераспознанной строкой или NaN: просто не равны
            if strict:
                raise
            return NotImplemented
        if rhs is None:
            return NotImplemented
        return compare_fractions(self._improper(), rhs._improper(), relation)

    def __eq__(self, other: object) -> bool:
        return self._relate(other, operator.eq, strict=False)

    def __ne__(self, other: object) -> bool:
        return self._relate(other, operator.ne, strict=False)

    def __lt__(self, other: Operand) -> bool:
        return self._relate(other, operator.lt)

    def __le__(self, other: Operand) -> bool:
        return self._relate(other, operator.le)

    def __gt__(self, other: Operand) -> bool:
        return self._relate(other, operator.gt)

    def __ge__(self, other: Operand) -> bool:
        return self._relate(other, operator.ge)

    # Мутабельный value-объект
    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # конверсии Python
    # -------------------------------------------------------------------------

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        numerator, denominator = self._improper()
        quotient = abs(numerator) // abs(denominator)
        return quotient if (numerator < 0) == (denominator < 0) else -quotient

    def __bool__(self) -> bool:
        return self._improper()[0] != 0

    def __str__(self) -> str:
        return format_fraction(self)


# =============================================================================
# КОНВЕРСИЯ ОПЕРАНДОВ
# =============================================================================


def _is_integer(value: object) -> bool:
    # bool — подкласс int, но не операнд дроби
    return isinstance(value, int) and not isinstance(value, bool)


def _parts_from_args(args: tuple[Any, ...]) -> FracTriple:
    if len(args) == 0:
        return (0, 0, 1)

    if len(args) == 1:
        value = args[0]
        if isinstance(value, Frac):
            return value._parts()
        if _is_integer(value):
            return (0, value, 1)
        if isinstance(value, float):
            return decimal_to_parts(value)
        if isinstance(value, str):
            return parse_fraction_parts(value)
        raise TypeError(f"cannot construct Frac from {type(value).__name__}")

    if len(args) in (2, 3) and all(_is_integer(a) for a in args):
        if len(args) == 2:
            return (0, args[0], args[1])
        return (args[0], args[1], args[2])

    raise TypeError(f"unsupported Frac constructor arguments: {args!r}")


def _parts_from_fields(data: dict[str, Any]) -> FracTriple:
    unknown = set(data) - set(_FIELDS)
    if unknown:
        raise TypeError(f"unknown Frac fields: {sorted(unknown)}")
    parts = (data.get("whole", 0), data.get("numerator", 0), data.get("denominator", 1))
    if not all(_is_integer(p) for p in parts):
        raise TypeError(f"Frac fields must be integers, got {parts!r}")
    return parts


def _from_parts(parts: FracParts) -> Frac:
    numerator, denominator = parts
    return Frac(numerator, denominator)


def _coerce(value: object) -> Frac | None:
    if isinstance(value, Frac):
        return value
    if _is_integer(value) or isinstance(value, (float, str)):
        return Frac(value)
    return None


def as_frac(value: Operand) -> Frac:
    """
    Единая точка конверсии операнда в Frac.

    Frac возвращается как есть; int, float и строка конвертируются
    соответствующим конструктором.

    Raises:
        TypeError: для неподдерживаемого типа
    """
    result = _coerce(value)
    if result is None:
        raise TypeError(f"cannot convert {type(value).__name__} to Frac")
    return result
