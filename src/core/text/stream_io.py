"""
Stream I/O — Построчное чтение и запись дробей

Контракт чтения (FracReader.read):
1. Одна строка из потока, обрезка пробелов по краям
2. Пустая строка или первый символ не цифра и не '-' → InvalidFormatError
3. Попытка (a): вся строка — десятичное число ("0.5", "-1.25", "3e-2")
   → DecimalConverter (всегда нормализовано)
4. Попытка (b): грамматика дроби ("1/2", "25", "3 1/2")
5. Любая ошибка помечает reader как failed и пробрасывается как есть

Контракт записи (write_fraction): каноническая текстовая форма без перевода
строки.
"""

import logging
import re
from dataclasses import dataclass
from typing import Final, TextIO

from src.core.domain.frac import Frac
from src.core.math.errors import FracError, InvalidFormatError
from src.core.text.formatter import format_fraction
from src.core.text.parser import DIGITS

LOG = logging.getLogger(__name__)

# Полная десятичная запись: знак, цифры, необязательная дробная часть и экспонента
DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ReaderConfig:
    """Конфигурация FracReader.

    Параметры разбора строки.
    """

    # Символы, обрезаемые по краям строки
    strip_chars: str = " \t\n\r\f\v"

    # Пробовать десятичную запись до грамматики дроби
    allow_decimal: bool = True


# =============================================================================
# READER
# =============================================================================


class FracReader:
    """
    Построчное чтение дробей из текстового потока.

    После любой ошибки reader помечается как failed; дальнейшие вызовы read()
    отклоняются до clear().
    """

    def __init__(self, stream: TextIO, config: ReaderConfig | None = None):
        """
        Args:
            stream: Текстовый поток (sys.stdin, io.StringIO, файл)
            config: конфигурация reader (опционально, используется default)
        """
        self.stream = stream
        self.config = config or ReaderConfig()
        self.failed = False

    def clear(self) -> None:
        """Сброс флага failed."""
        self.failed = False

    def read(self) -> Frac:
        """
        Чтение одной дроби.

        Returns:
            Frac из очередной строки

        Raises:
            EOFError: поток исчерпан
            InvalidFormatError: строка не распознана или reader в состоянии failed
            ZeroDivisorError: нулевой знаменатель
            IntegerOverflowError: переполнение int32
        """
        if self.failed:
            raise InvalidFormatError("reader is in failed state; call clear() first")

        line = self.stream.readline()
        if line == "":
            raise EOFError("no more input")

        try:
            return self._convert(line.strip(self.config.strip_chars))
        except FracError as e:
            self.failed = True
            LOG.warning("failed to read fraction from %r: %s", line, e)
            raise

    def _convert(self, text: str) -> Frac:
        if not text or not (text[0] in DIGITS or text[0] == "-"):
            raise InvalidFormatError(
                f"input must start with a digit or '-'; {InvalidFormatError.default_message}"
            )

        if self.config.allow_decimal and DECIMAL_PATTERN.fullmatch(text):
            LOG.debug("reading %r as decimal", text)
            return Frac(float(text))

        LOG.debug("reading %r as fraction text", text)
        return Frac(text)

    def __iter__(self):
        """Итерация по дробям до конца потока."""
        while True:
            try:
                yield self.read()
            except EOFError:
                return


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def read_fraction(stream: TextIO, config: ReaderConfig | None = None) -> Frac:
    """
    Чтение одной дроби из потока (одноразовый FracReader).

    Raises:
        см. FracReader.read
    """
    return FracReader(stream, config).read()


def write_fraction(stream: TextIO, frac: Frac) -> None:
    """
    Запись канонической текстовой формы дроби в поток.

    Сокращение не выполняется.
    """
    stream.write(format_fraction(frac))
