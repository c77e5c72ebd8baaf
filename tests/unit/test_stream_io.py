"""
Тесты для Stream I/O

Проверяет:
1. Десятичный путь ("0.75" → 3/4) и путь грамматики дроби
2. Состояние failed и clear()
3. EOFError на исчерпанном потоке
4. ReaderConfig
5. Итерацию и запись
6. Логирование ошибок чтения
"""

import io
import logging

import pytest

from src.core.domain import Frac
from src.core.math.errors import (
    IntegerOverflowError,
    InvalidFormatError,
    ZeroDivisorError,
)
from src.core.text.stream_io import (
    FracReader,
    ReaderConfig,
    read_fraction,
    write_fraction,
)


def _fields(frac: Frac) -> tuple[int, int, int]:
    return (frac.whole, frac.numerator, frac.denominator)


def _reader(text: str, config: ReaderConfig | None = None) -> FracReader:
    return FracReader(io.StringIO(text), config)


# =============================================================================
# ТЕСТЫ ЧТЕНИЯ
# =============================================================================


class TestRead:
    """Тесты FracReader.read"""

    def test_decimal(self):
        assert _fields(_reader("0.75\n").read()) == (0, 3, 4)

    def test_negative_decimal(self):
        assert _fields(_reader("-0.5\n").read()) == (0, -1, 2)

    def test_integer_goes_through_decimal_path(self):
        assert _fields(_reader("25\n").read()) == (0, 25, 1)

    def test_fraction(self):
        assert _fields(_reader("1/2\n").read()) == (0, 1, 2)

    def test_mixed_with_padding(self):
        assert _fields(_reader("  3 1/2  \n").read()) == (0, 7, 2)

    def test_negative_fraction(self):
        assert _fields(_reader("-1/2").read()) == (0, -1, 2)

    def test_fraction_not_simplified(self):
        assert _fields(_reader("6/8\n").read()) == (0, 6, 8)

    def test_read_fraction_helper(self):
        assert read_fraction(io.StringIO("2/3\n")) == Frac(2, 3)


class TestFailures:
    """Тесты ошибок и состояния failed"""

    def test_invalid_sets_failed(self):
        reader = _reader("abc\n1/2\n")
        with pytest.raises(InvalidFormatError):
            reader.read()
        assert reader.failed

    def test_failed_reader_rejects_until_clear(self):
        reader = _reader("abc\n1/2\n")
        with pytest.raises(InvalidFormatError):
            reader.read()
        with pytest.raises(InvalidFormatError, match="failed state"):
            reader.read()

        reader.clear()
        assert not reader.failed
        assert _fields(reader.read()) == (0, 1, 2)

    def test_zero_denominator(self):
        reader = _reader("1/0\n")
        with pytest.raises(ZeroDivisorError):
            reader.read()
        assert reader.failed

    def test_decimal_overflow(self):
        reader = _reader("1e20\n")
        with pytest.raises(IntegerOverflowError):
            reader.read()
        assert reader.failed

    def test_blank_line(self):
        with pytest.raises(InvalidFormatError):
            _reader("\n").read()

    def test_leading_plus_rejected(self):
        with pytest.raises(InvalidFormatError):
            _reader("+1/2\n").read()

    def test_eof(self):
        reader = _reader("")
        with pytest.raises(EOFError):
            reader.read()
        assert not reader.failed

    def test_failure_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.core.text.stream_io"):
            with pytest.raises(InvalidFormatError):
                _reader("abc\n").read()
        assert "failed to read fraction" in caplog.text


class TestReaderConfig:
    """Тесты ReaderConfig"""

    def test_defaults(self):
        config = ReaderConfig()
        assert config.allow_decimal is True
        assert "\t" in config.strip_chars

    def test_decimal_disabled(self):
        config = ReaderConfig(allow_decimal=False)
        assert _fields(_reader("25\n", config).read()) == (0, 25, 1)
        with pytest.raises(InvalidFormatError):
            _reader("0.5\n", config).read()

    def test_frozen(self):
        config = ReaderConfig()
        with pytest.raises(AttributeError):
            config.allow_decimal = False


# =============================================================================
# ТЕСТЫ ИТЕРАЦИИ И ЗАПИСИ
# =============================================================================


class TestIterationAndWrite:
    """Тесты __iter__ и write_fraction"""

    def test_iterate_until_eof(self):
        values = list(_reader("1/2\n0.25\n2 1/3\n"))
        assert [_fields(v) for v in values] == [(0, 1, 2), (0, 1, 4), (0, 7, 3)]

    def test_iteration_stops_on_error(self):
        reader = _reader("1/2\nabc\n")
        iterator = iter(reader)
        assert _fields(next(iterator)) == (0, 1, 2)
        with pytest.raises(InvalidFormatError):
            next(iterator)

    def test_write(self):
        buffer = io.StringIO()
        write_fraction(buffer, Frac(1, 1, 2))
        assert buffer.getvalue() == "1 1/2"

    def test_write_then_read(self):
        buffer = io.StringIO()
        write_fraction(buffer, Frac(-2, 3, 4))
        buffer.write("\n")
        buffer.seek(0)
        assert _fields(FracReader(buffer).read()) == (0, -5, 4)
