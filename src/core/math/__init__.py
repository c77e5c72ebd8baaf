"""
Core math modules для FracLib

Арифметика 32-битных дробей с гарантией отсутствия переполнения.
"""

# Errors
from src.core.math.errors import (
    INVALID_FORMAT_ERROR,
    OVERFLOW_ERROR,
    ZERO_DIVISOR_ERROR,
    FracError,
    IntegerOverflowError,
    InvalidFormatError,
    ZeroDivisorError,
)

# Overflow checks
from src.core.math.overflow_checks import (
    INT32_MAX,
    INT32_MIN,
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    is_int32,
    require_int32,
    will_addition_overflow,
    will_multiplication_overflow,
    will_subtraction_overflow,
)

# Normalization
from src.core.math.normalization import (
    gcd,
    improper_numerator,
    simplify_parts,
    split_improper,
)

# Decimal conversion
from src.core.math.decimal_conversion import (
    DECIMAL_PLACES,
    count_decimal_places,
    decimal_to_parts,
)

# Arithmetic
from src.core.math.arithmetic import (
    add_fractions,
    add_integer,
    divide_fractions,
    divide_integer,
    multiply_fractions,
    multiply_integer,
    subtract_fractions,
    subtract_integer,
)

# Comparison
from src.core.math.comparison import (
    compare_fractions,
    compare_sign,
    cross_products,
)

__all__ = [
    # Errors — messages
    "INVALID_FORMAT_ERROR",
    "OVERFLOW_ERROR",
    "ZERO_DIVISOR_ERROR",
    # Errors — exceptions
    "FracError",
    "IntegerOverflowError",
    "InvalidFormatError",
    "ZeroDivisorError",
    # Overflow checks
    "INT32_MAX",
    "INT32_MIN",
    "checked_add",
    "checked_mul",
    "checked_neg",
    "checked_sub",
    "is_int32",
    "require_int32",
    "will_addition_overflow",
    "will_multiplication_overflow",
    "will_subtraction_overflow",
    # Normalization
    "gcd",
    "improper_numerator",
    "simplify_parts",
    "split_improper",
    # Decimal conversion
    "DECIMAL_PLACES",
    "count_decimal_places",
    "decimal_to_parts",
    # Arithmetic
    "add_fractions",
    "add_integer",
    "divide_fractions",
    "divide_integer",
    "multiply_fractions",
    "multiply_integer",
    "subtract_fractions",
    "subtract_integer",
    # Comparison
    "compare_fractions",
    "compare_sign",
    "cross_products",
]
