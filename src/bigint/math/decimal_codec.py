"""
Decimal Codec — разбор и печать десятичной записи

Разбор: строка читается chunk'ами по 9 десятичных цифр,
value = value * 10^9 + chunk (multiply-accumulate над magnitude).
Первый chunk может быть короче, если число цифр не кратно 9.

Печать: magnitude многократно делится (short division) на 10^9,
остатки собираются как chunk'и по 9 цифр, старший chunk без ведущих нулей.
"""

from typing import Final

from src.bigint.math.division import short_divide
from src.bigint.math.errors import InvalidArgument
from src.bigint.math.magnitude import is_zero, mul_small_in_place
from src.bigint.math.twos_complement import SignedMagnitude

# =============================================================================
# ПАРАМЕТРЫ CHUNK'ОВ
# =============================================================================

# 10^9 < 2^32: chunk помещается в один digit
DECIMAL_CHUNK_BASE: Final[int] = 1_000_000_000

# Количество десятичных цифр в chunk
DECIMAL_CHUNK_WIDTH: Final[int] = 9

_DECIMAL_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_decimal(text: str) -> SignedMagnitude:
    """
    Разбор десятичной строки с опциональным знаком.

    Args:
        text: Строка вида [+-]?[0-9]+

    Returns:
        SignedMagnitude (ноль всегда неотрицательный, "-0" → 0)

    Raises:
        InvalidArgument: Пустая строка, одиночный знак или нецифровой символ

    Examples:
        >>> parse_decimal("-4294967296")
        SignedMagnitude(negative=True, digits=[0, 1])
    """
    if not isinstance(text, str):
        raise InvalidArgument(f"decimal text must be str, got {type(text).__name__}")

    if text in ("", "+", "-"):
        raise InvalidArgument(f"empty number: {text!r}")

    negative = text[0] == "-"
    body = text[1:] if text[0] in "+-" else text

    bad = [ch for ch in body if ch not in _DECIMAL_DIGITS]
    if bad:
        raise InvalidArgument(f"non-numerical character {bad[0]!r} in {text!r}")

    digits = [0]
    step = len(body) % DECIMAL_CHUNK_WIDTH or DECIMAL_CHUNK_WIDTH
    pos = 0
    while pos < len(body):
        chunk = int(body[pos:pos + step])
        mul_small_in_place(digits, DECIMAL_CHUNK_BASE if pos else 1, chunk)
        pos += step
        step = DECIMAL_CHUNK_WIDTH

    return SignedMagnitude(negative and not is_zero(digits), digits)


# =============================================================================
# ПЕЧАТЬ
# =============================================================================


def format_decimal(negative: bool, digits: list[int]) -> str:
    """
    Canonical десятичная запись: без ведущих нулей, "-" для отрицательных.

    Examples:
        >>> format_decimal(True, [0, 1])
        '-4294967296'
        >>> format_decimal(False, [0])
        '0'
    """
    if is_zero(digits):
        return "0"

    chunks: list[str] = []
    current = list(digits)
    while not is_zero(current):
        current, remainder = short_divide(current, DECIMAL_CHUNK_BASE)
        chunks.append(str(remainder))

    text = chunks[-1] + "".join(
        chunk.zfill(DECIMAL_CHUNK_WIDTH) for chunk in reversed(chunks[:-1])
    )
    return "-" + text if negative else text
