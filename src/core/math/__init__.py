"""
Core math modules

Алгоритмы над величинами бесконечных целых (word chains) и правила
sentinel-значений.
"""

# Errors
from src.core.math.errors import (
    ArithmeticUndefinedError,
    InfiniteIntegerError,
    IntegerFormatError,
    InvalidRadixError,
    WillNotFitError,
)

# Word chain
from src.core.math.words import (
    SIGNED_LONG_MAX,
    WORD_BASE,
    WORD_BITS,
    WORD_MASK,
    add_above,
    bit_length,
    compare_magnitudes,
    fits_signed_long,
    from_native,
    is_power_of_two,
    multiply_by_word,
    multiply_magnitudes,
    shift_left,
    shift_right,
    strip_common_trailing_zeros,
    subtract_smaller,
    to_native,
    trim,
)

# Division engine
from src.core.math.division import (
    DEFAULT_DIVISION_CONFIG,
    DivisionConfig,
    DivisionStrategy,
    binary_long_divide,
    binary_search_divide,
    divide_magnitudes,
    divide_native,
    select_division_strategy,
)

# Number theory
from src.core.math.number_theory import (
    estimate_sqrt,
    gcd_magnitudes,
    is_prime_magnitude,
    lcm_magnitudes,
    sqrt_ceil_magnitude,
)

# Radix codec
from src.core.math.radix import (
    DEFAULT_RADIX_CONFIG,
    DIGITS,
    MAX_RADIX,
    MAX_STRING_LENGTH,
    MIN_RADIX,
    BoundedStringBuilder,
    RadixConfig,
    digit_value,
    enforce_standard_radix,
    parse_magnitude,
    render_debug,
    render_magnitude,
)

# Special cases
from src.core.math.special_cases import (
    NumberKind,
    OperandClass,
    Outcome,
    classify,
    compare_kinds,
)

__all__ = [
    # Errors
    "InfiniteIntegerError",
    "ArithmeticUndefinedError",
    "WillNotFitError",
    "IntegerFormatError",
    "InvalidRadixError",
    # Word chain (Constants)
    "SIGNED_LONG_MAX",
    "WORD_BASE",
    "WORD_BITS",
    "WORD_MASK",
    # Word chain (Functions)
    "add_above",
    "bit_length",
    "compare_magnitudes",
    "fits_signed_long",
    "from_native",
    "is_power_of_two",
    "multiply_by_word",
    "multiply_magnitudes",
    "shift_left",
    "shift_right",
    "strip_common_trailing_zeros",
    "subtract_smaller",
    "to_native",
    "trim",
    # Division (Types)
    "DEFAULT_DIVISION_CONFIG",
    "DivisionConfig",
    "DivisionStrategy",
    # Division (Functions)
    "binary_long_divide",
    "binary_search_divide",
    "divide_magnitudes",
    "divide_native",
    "select_division_strategy",
    # Number theory
    "estimate_sqrt",
    "gcd_magnitudes",
    "is_prime_magnitude",
    "lcm_magnitudes",
    "sqrt_ceil_magnitude",
    # Radix (Constants)
    "DEFAULT_RADIX_CONFIG",
    "DIGITS",
    "MAX_RADIX",
    "MAX_STRING_LENGTH",
    "MIN_RADIX",
    # Radix (Types)
    "BoundedStringBuilder",
    "RadixConfig",
    # Radix (Functions)
    "digit_value",
    "enforce_standard_radix",
    "parse_magnitude",
    "render_debug",
    "render_magnitude",
    # Special cases
    "NumberKind",
    "OperandClass",
    "Outcome",
    "classify",
    "compare_kinds",
]
