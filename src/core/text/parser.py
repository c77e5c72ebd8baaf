"""
Fraction Parser — Разбор текстовой записи дроби

Грамматика:
    fraction := integer
              | integer '/' integer
              | integer WS integer '/' integer      (смешанная форма)
    integer  := ['-'] digit+       (знак допустим только у первого числа)
    WS       := (' ' | '\\t')+

Пробелы и табы в начале, после '/' и в конце пропускаются. После дроби
допускается только конец ввода или перевод строки; всё остальное —
InvalidFormatError.

Источник — строка или текстовый поток. Поток читается посимвольно
(peek/get) и не дочитывается дальше конца строки.

Результат — тройка (0, numerator, denominator): смешанная форма сразу
переводится в неправильную дробь ("1 1/2" → 3/2, "-1 1/2" → -1/2):
numerator = denominator * whole + numerator.
"""

import io
import logging
from typing import TYPE_CHECKING, Final, NoReturn, TextIO

from src.core.math.errors import (
    IntegerOverflowError,
    InvalidFormatError,
    ZeroDivisorError,
)
from src.core.math.normalization import improper_numerator, simplify_parts
from src.core.math.overflow_checks import INT32_MAX

if TYPE_CHECKING:
    from src.core.domain.frac import Frac

LOG = logging.getLogger(__name__)

DIGITS: Final[frozenset[str]] = frozenset("0123456789")

WHITESPACE: Final[frozenset[str]] = frozenset(" \t")

LINE_END: Final[frozenset[str]] = frozenset("\r\n")


# =============================================================================
# ИСТОЧНИК СИМВОЛОВ
# =============================================================================


class CharSource:
    """
    Посимвольный источник с одним символом lookahead.

    Конец ввода обозначается пустой строкой.
    """

    def __init__(self, source: str | TextIO):
        self._stream: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self._lookahead: str | None = None
        self.position = 0

    def peek(self) -> str:
        if self._lookahead is None:
            self._lookahead = self._stream.read(1)
        return self._lookahead

    def get(self) -> str:
        ch = self.peek()
        self._lookahead = None
        if ch:
            self.position += 1
        return ch

    def take_if_next(self, expected: str) -> bool:
        """
        Забрать следующий символ, только если он равен expected.

        Без lookahead: несовпавший символ возвращается в поток через
        seek. Для потоков без seek символ не читается.
        """
        if self._lookahead is not None:
            if self._lookahead != expected:
                return False
            self.get()
            return True

        if not self._stream.seekable():
            return False
        mark = self._stream.tell()
        if self._stream.read(1) == expected:
            self.position += 1
            return True
        self._stream.seek(mark)
        return False


# =============================================================================
# PARSER
# =============================================================================


class FractionParser:
    """
    Разбор одной дроби из источника символов.

    Ошибки:
        InvalidFormatError: нарушение грамматики
        ZeroDivisorError: нулевой знаменатель
        IntegerOverflowError: число или improper numerator не помещаются в int32
    """

    def __init__(self, source: str | TextIO):
        self._chars = CharSource(source)

    def parse(self) -> tuple[int, int, int]:
        """
        Разбор дроби.

        Returns:
            (0, numerator, denominator) — неправильная дробь без сокращения
        """
        self._skip_whitespace()
        first = self._read_integer(allow_sign=True)

        if self._at_terminator():
            self._consume_line_end()
            return (0, first, 1)

        ch = self._chars.get()
        if ch in WHITESPACE:
            self._skip_whitespace()
            if self._at_terminator():
                self._consume_line_end()
                return (0, first, 1)
            whole = first
            numerator = self._read_integer(allow_sign=False)
            if self._chars.peek() != "/":
                self._fail("expected '/' after the fractional numerator")
            self._chars.get()
        elif ch == "/":
            whole = 0
            numerator = first
        else:
            self._fail(f"unexpected character {ch!r}")

        self._skip_whitespace()
        denominator = self._read_integer(allow_sign=False)
        self._skip_whitespace()
        if not self._at_terminator():
            self._fail(f"trailing characters after denominator: {self._chars.peek()!r}")
        self._consume_line_end()

        if denominator == 0:
            raise ZeroDivisorError()

        if whole != 0:
            numerator = improper_numerator(whole, numerator, denominator)

        return (0, numerator, denominator)

    # -------------------------------------------------------------------------
    # helpers
    # -------------------------------------------------------------------------

    def _skip_whitespace(self) -> None:
        while self._chars.peek() in WHITESPACE:
            self._chars.get()

    def _at_terminator(self) -> bool:
        ch = self._chars.peek()
        return ch == "" or ch in LINE_END

    def _consume_line_end(self) -> None:
        ch = self._chars.peek()
        if ch == "\n":
            self._chars.get()
        elif ch == "\r":
            self._chars.get()
            # "\r\n" или одиночный "\r"
            self._chars.take_if_next("\n")

    def _read_integer(self, allow_sign: bool) -> int:
        sign = 1
        if allow_sign and self._chars.peek() == "-":
            self._chars.get()
            sign = -1

        ch = self._chars.peek()
        if ch not in DIGITS:
            self._fail("expected a digit")

        # -INT32_MIN == INT32_MAX + 1
        limit = INT32_MAX if sign > 0 else INT32_MAX + 1
        value = 0
        while self._chars.peek() in DIGITS:
            value = value * 10 + int(self._chars.get())
            if value > limit:
                raise IntegerOverflowError()
        return sign * value

    def _fail(self, reason: str) -> NoReturn:
        LOG.debug("fraction parse failed at position %d: %s", self._chars.position, reason)
        raise InvalidFormatError(
            f"{reason} at position {self._chars.position}; {InvalidFormatError.default_message}"
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def parse_fraction_parts(source: str | TextIO, simplify: bool = False) -> tuple[int, int, int]:
    """
    Разбор дроби в тройку (whole, numerator, denominator).

    Args:
        source: Строка или текстовый поток
        simplify: Нормализовать результат при успешном разборе

    Returns:
        Тройка; без simplify — (0, numerator, denominator)

    Examples:
        >>> parse_fraction_parts("3/4")
        (0, 3, 4)
        >>> parse_fraction_parts("1 1/2")
        (0, 3, 2)
        >>> parse_fraction_parts("25")
        (0, 25, 1)
        >>> parse_fraction_parts("6/8", simplify=True)
        (0, 3, 4)
    """
    parts = FractionParser(source).parse()
    if simplify:
        return simplify_parts(*parts)
    return parts


def parse_fraction(source: str | TextIO, simplify: bool = False) -> "Frac":
    """
    Разбор дроби в Frac.

    Raises:
        InvalidFormatError / ZeroDivisorError / IntegerOverflowError
    """
    # domain.frac импортирует этот модуль
    from src.core.domain.frac import Frac

    return Frac(*parse_fraction_parts(source, simplify=simplify))
