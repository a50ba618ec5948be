"""
Two's-Complement Adapter — bitwise операции над sign-magnitude

Арифметика хранит sign-magnitude, а bitwise операции и сдвиги требуют
two's-complement семантики бесконечной точности. Модуль даёт явное
обратимое преобразование и операции поверх него.

Two's-complement view отрицательного числа длины n digits:
    D = B^n - |x|, выше digit n подразумеваются все единицы (sign extension).
Для неотрицательного числа view совпадает с magnitude, выше — нули.

Все функции принимают и возвращают (negative, digits); результат canonical,
ноль всегда неотрицательный.
"""

import operator
from typing import Callable, NamedTuple

from src.bigint.math.errors import InvalidArgument
from src.bigint.math.magnitude import (
    DIGIT_BITS,
    DIGIT_MASK,
    increment_magnitude_in_place,
    is_zero,
    trim,
)

# Бинарная операция над двумя digits
DigitOperation = Callable[[int, int], int]

BITWISE_AND: DigitOperation = operator.and_
BITWISE_OR: DigitOperation = operator.or_
BITWISE_XOR: DigitOperation = operator.xor


# =============================================================================
# RESULT
# =============================================================================


class SignedMagnitude(NamedTuple):
    """Знак и canonical magnitude."""

    negative: bool
    digits: list[int]


def _signed(negative: bool, magnitude: list[int]) -> SignedMagnitude:
    trim(magnitude)
    return SignedMagnitude(negative and not is_zero(magnitude), magnitude)


# =============================================================================
# ПРЕОБРАЗОВАНИЕ
# =============================================================================


def _invert_in_place(digits: list[int]) -> list[int]:
    for i in range(len(digits)):
        digits[i] ^= DIGIT_MASK
    return digits


def to_twos_complement(negative: bool, digits: list[int]) -> list[int]:
    """
    Sign-magnitude → two's-complement view той же длины.

    Отрицательное: инвертировать все digits и прибавить единицу
    (перенос за пределы длины отбрасывается). Неотрицательное: копия.

    Examples:
        >>> to_twos_complement(True, [5])
        [4294967291]
        >>> to_twos_complement(False, [5])
        [5]
    """
    view = list(digits)
    if not negative:
        return view

    _invert_in_place(view)
    for i in range(len(view)):
        if view[i] == DIGIT_MASK:
            view[i] = 0
        else:
            view[i] += 1
            break
    return view


def from_twos_complement(negative: bool, view: list[int]) -> list[int]:
    """
    Two's-complement view → canonical magnitude.

    Для отрицательного |x| = B^n - D (инверсия + 1). При D == 0
    magnitude равна B^n и получает дополнительный digit.
    """
    magnitude = list(view)
    if negative:
        increment_magnitude_in_place(_invert_in_place(magnitude))
    return trim(magnitude)


def _extend(view: list[int], negative: bool, length: int) -> list[int]:
    fill = DIGIT_MASK if negative else 0
    return view + [fill] * (length - len(view))


# =============================================================================
# BITWISE AND / OR / XOR / NOT
# =============================================================================


def bitwise_combine(
    operation: DigitOperation,
    a_negative: bool,
    a_digits: list[int],
    b_negative: bool,
    b_digits: list[int],
) -> SignedMagnitude:
    """
    Общая bitwise операция над двумя знаковыми числами.

    Оба операнда переводятся в two's-complement view, короткий расширяется
    знаком (0 или 2^32 - 1), операция применяется поразрядно. Знак
    результата: та же операция над sign-битами (negative = 1).

    Args:
        operation: Поразрядная операция (BITWISE_AND / BITWISE_OR / BITWISE_XOR)
        a_negative, a_digits: Левый операнд
        b_negative, b_digits: Правый операнд

    Returns:
        SignedMagnitude результата

    Examples:
        >>> bitwise_combine(BITWISE_AND, True, [5], False, [3])
        SignedMagnitude(negative=False, digits=[3])
    """
    length = max(len(a_digits), len(b_digits))
    a_view = _extend(to_twos_complement(a_negative, a_digits), a_negative, length)
    b_view = _extend(to_twos_complement(b_negative, b_digits), b_negative, length)

    result_view = [operation(x, y) & DIGIT_MASK for x, y in zip(a_view, b_view)]
    negative = bool(operation(int(a_negative), int(b_negative)) & 1)

    return _signed(negative, from_twos_complement(negative, result_view))


def bitwise_invert(negative: bool, digits: list[int]) -> SignedMagnitude:
    """
    ~x = -x - 1 через two's-complement view.

    К view добавляется явный sign-digit: после инверсии знак результата
    определяется старшим digit (все единицы → отрицательный).
    """
    view = to_twos_complement(negative, digits)
    view.append(DIGIT_MASK if negative else 0)
    _invert_in_place(view)

    result_negative = view[-1] == DIGIT_MASK
    return _signed(result_negative, from_twos_complement(result_negative, view))


# =============================================================================
# СДВИГИ
# =============================================================================


def _check_shift(bits: int) -> None:
    if bits < 0:
        raise InvalidArgument(f"negative shift count: {bits}")


def shift_left(negative: bool, digits: list[int], bits: int) -> SignedMagnitude:
    """
    x << bits в two's-complement view.

    Целые digits сдвига вставляются нулями снизу, остаток сдвига
    переносит биты в следующий digit. У отрицательного новый старший
    digit заполняется единицами sign extension.

    Raises:
        InvalidArgument: Если bits < 0
    """
    _check_shift(bits)
    whole, rem = divmod(bits, DIGIT_BITS)
    view = [0] * whole + to_twos_complement(negative, digits)

    if rem:
        carry = 0
        for i in range(whole, len(view)):
            cur = view[i]
            view[i] = ((cur << rem) & DIGIT_MASK) | carry
            carry = cur >> (DIGIT_BITS - rem)
        if negative:
            carry |= (DIGIT_MASK << rem) & DIGIT_MASK
        view.append(carry)

    return _signed(negative, from_twos_complement(negative, view))


def shift_right(negative: bool, digits: list[int], bits: int) -> SignedMagnitude:
    """
    Арифметический x >> bits (округление к минус бесконечности).

    Если сдвиг отбрасывает все digits, результат равен нулю
    независимо от знака.

    Raises:
        InvalidArgument: Если bits < 0
    """
    _check_shift(bits)
    whole, rem = divmod(bits, DIGIT_BITS)
    view = to_twos_complement(negative, digits)

    if whole >= len(view):
        return SignedMagnitude(False, [0])

    view = view[whole:]
    if rem:
        carry = ((DIGIT_MASK << (DIGIT_BITS - rem)) & DIGIT_MASK) if negative else 0
        for i in range(len(view) - 1, -1, -1):
            cur = view[i]
            view[i] = (cur >> rem) | carry
            carry = (cur << (DIGIT_BITS - rem)) & DIGIT_MASK

    return _signed(negative, from_twos_complement(negative, view))
