"""
Digit-level math для BigInteger

Алгоритмы над magnitude (list[int], little-endian, base 2^32).
"""

# Errors
from src.bigint.math.errors import BigIntegerError, DivisionByZero, InvalidArgument

# Magnitude arithmetic
from src.bigint.math.magnitude import (
    # Constants
    DIGIT_BASE,
    DIGIT_BITS,
    DIGIT_MASK,
    INT64_MIN,
    UINT64_MAX,
    # Canonical form
    is_zero,
    magnitude_from_int,
    magnitude_to_int,
    split_fixed_width,
    trim,
    # Arithmetic
    add_magnitudes_in_place,
    compare_magnitudes,
    decrement_magnitude_in_place,
    increment_magnitude_in_place,
    mul_magnitudes,
    mul_small_in_place,
    shift_magnitude_left,
    shift_magnitude_right,
    sub_magnitudes,
    sub_magnitudes_in_place,
)

# Division engine
from src.bigint.math.division import (
    MagnitudeDivision,
    divmod_magnitudes,
    long_divide,
    short_divide,
)

# Two's-complement adapter
from src.bigint.math.twos_complement import (
    BITWISE_AND,
    BITWISE_OR,
    BITWISE_XOR,
    SignedMagnitude,
    bitwise_combine,
    bitwise_invert,
    from_twos_complement,
    shift_left,
    shift_right,
    to_twos_complement,
)

# Decimal codec
from src.bigint.math.decimal_codec import (
    DECIMAL_CHUNK_BASE,
    DECIMAL_CHUNK_WIDTH,
    format_decimal,
    parse_decimal,
)

__all__ = [
    # Errors
    "BigIntegerError",
    "DivisionByZero",
    "InvalidArgument",
    # Magnitude — Constants
    "DIGIT_BASE",
    "DIGIT_BITS",
    "DIGIT_MASK",
    "INT64_MIN",
    "UINT64_MAX",
    # Magnitude — Canonical form
    "is_zero",
    "magnitude_from_int",
    "magnitude_to_int",
    "split_fixed_width",
    "trim",
    # Magnitude — Arithmetic
    "add_magnitudes_in_place",
    "compare_magnitudes",
    "decrement_magnitude_in_place",
    "increment_magnitude_in_place",
    "mul_magnitudes",
    "mul_small_in_place",
    "shift_magnitude_left",
    "shift_magnitude_right",
    "sub_magnitudes",
    "sub_magnitudes_in_place",
    # Division
    "MagnitudeDivision",
    "divmod_magnitudes",
    "long_divide",
    "short_divide",
    # Two's complement
    "BITWISE_AND",
    "BITWISE_OR",
    "BITWISE_XOR",
    "SignedMagnitude",
    "bitwise_combine",
    "bitwise_invert",
    "from_twos_complement",
    "shift_left",
    "shift_right",
    "to_twos_complement",
    # Decimal codec
    "DECIMAL_CHUNK_BASE",
    "DECIMAL_CHUNK_WIDTH",
    "format_decimal",
    "parse_decimal",
]
