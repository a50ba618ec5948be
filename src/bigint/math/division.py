"""
Division Engine — short division и Knuth Algorithm D

Два пути, выбор по размеру делителя:
- Short division: делитель из одного digit, один проход сверху вниз
- Long division: Knuth Algorithm D (normalize, estimate, correct)

Модуль работает только с magnitudes. Знаки частного и остатка
назначает вызывающий код (truncating division: знак остатка = знак делимого).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dividend = divisor * quotient + remainder
2. 0 <= remainder < divisor
3. Нулевой делитель → DivisionByZero на любом пути
4. Коррекция оценки digit частного выполняется не более двух раз
"""

import logging
from typing import NamedTuple

from src.bigint.math.errors import DivisionByZero
from src.bigint.math.magnitude import (
    DIGIT_BITS,
    DIGIT_MASK,
    compare_magnitudes,
    is_zero,
    mul_small_in_place,
    shift_magnitude_left,
    shift_magnitude_right,
    sub_magnitudes_in_place,
    trim,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


class MagnitudeDivision(NamedTuple):
    """Частное и остаток деления magnitudes."""

    quotient: list[int]
    remainder: list[int]


# =============================================================================
# SHORT DIVISION
# =============================================================================


def short_divide(dividend: list[int], divisor: int) -> tuple[list[int], int]:
    """
    Деление magnitude на один digit.

    Args:
        dividend: Magnitude делимого
        divisor: Делитель в диапазоне [1, 2^32)

    Returns:
        (quotient digits, scalar remainder)

    Raises:
        DivisionByZero: Если divisor == 0

    Examples:
        >>> short_divide([10], 3)
        ([3], 1)
    """
    if divisor == 0:
        raise DivisionByZero("division by zero")

    quotient = [0] * len(dividend)
    remainder = 0
    for i in range(len(dividend) - 1, -1, -1):
        cur = (remainder << DIGIT_BITS) | dividend[i]
        quotient[i], remainder = divmod(cur, divisor)

    return trim(quotient), remainder


# =============================================================================
# LONG DIVISION (KNUTH ALGORITHM D)
# =============================================================================


def _normalization_shift(top_digit: int) -> int:
    """Количество бит k, при котором старший бит top_digit << k установлен."""
    return DIGIT_BITS - top_digit.bit_length()


def _scaled_divisor(divisor: list[int], factor: int, offset: int) -> list[int]:
    """divisor * factor * B^offset."""
    return trim([0] * offset + mul_small_in_place(list(divisor), factor))


def long_divide(dividend: list[int], divisor: list[int]) -> MagnitudeDivision:
    """
    Knuth Algorithm D для делителя из двух и более digits.

    Алгоритм:
        1. |dividend| < |divisor| → (0, dividend)
        2. Normalize: сдвиг обоих операндов на k бит влево, чтобы
           старший бит старшего digit делителя был установлен
        3. Digits частного от старшего к младшему: оценка по двум старшим
           digits остатка / старший digit делителя (cap 2^32 - 1),
           вычитание trial * shifted_divisor, коррекция вниз
        4. Un-normalize остатка: сдвиг вправо на k бит

    Raises:
        DivisionByZero: Если divisor == 0
    """
    if is_zero(divisor):
        raise DivisionByZero("division by zero")

    if compare_magnitudes(dividend, divisor) < 0:
        logger.debug("long_divide: dividend < divisor, trivial result")
        return MagnitudeDivision([0], list(dividend))

    k = _normalization_shift(divisor[-1])
    remainder = shift_magnitude_left(dividend, k)
    norm_divisor = shift_magnitude_left(divisor, k)
    logger.debug("long_divide: normalization shift k=%d", k)

    n = len(remainder)
    m = len(norm_divisor)
    quotient = [0] * (n - m + 1)

    # Старший digit частного после нормализации не превышает 1
    top = _scaled_divisor(norm_divisor, 1, n - m)
    if compare_magnitudes(remainder, top) >= 0:
        quotient[n - m] = 1
        sub_magnitudes_in_place(remainder, top)

    leading = norm_divisor[-1]
    for j in range(n - m, 0, -1):
        hi = remainder[m + j - 1] if m + j - 1 < len(remainder) else 0
        lo = remainder[m + j - 2] if m + j - 2 < len(remainder) else 0
        estimate = min(((hi << DIGIT_BITS) | lo) // leading, DIGIT_MASK)

        product = _scaled_divisor(norm_divisor, estimate, j - 1)
        corrections = 0
        while compare_magnitudes(product, remainder) > 0:
            estimate -= 1
            corrections += 1
            sub_magnitudes_in_place(product, [0] * (j - 1) + norm_divisor)
        if corrections:
            logger.debug("long_divide: digit %d corrected %d time(s)", j - 1, corrections)

        sub_magnitudes_in_place(remainder, product)
        quotient[j - 1] = estimate

    return MagnitudeDivision(trim(quotient), shift_magnitude_right(remainder, k))


# =============================================================================
# DISPATCH
# =============================================================================


def divmod_magnitudes(dividend: list[int], divisor: list[int]) -> MagnitudeDivision:
    """
    Деление magnitudes с выбором пути по размеру делителя.

    Raises:
        DivisionByZero: Если divisor == 0
    """
    if is_zero(divisor):
        raise DivisionByZero("division by zero")

    if len(divisor) == 1:
        logger.debug("divmod_magnitudes: short division path")
        quotient, remainder = short_divide(dividend, divisor[0])
        return MagnitudeDivision(quotient, [remainder])

    logger.debug("divmod_magnitudes: long division path")
    return long_divide(dividend, divisor)
