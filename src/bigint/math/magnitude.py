"""
Magnitude — беззнаковая арифметика над digit-последовательностью

Magnitude хранится как list[int], little-endian (index 0 = младший digit),
каждый digit в диапазоне [0, 2^32). Функции модуля не знают о знаке.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Canonical form: len(digits) >= 1, старший digit != 0, кроме нуля ([0])
2. Каждый digit в [0, DIGIT_BASE)
3. Все функции возвращают canonical результат (trim выполняется внутри)

Функции с суффиксом _in_place мутируют переданный список и возвращают его.
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Ширина одного digit в битах
DIGIT_BITS: Final[int] = 32

# Основание системы счисления magnitude
DIGIT_BASE: Final[int] = 1 << DIGIT_BITS

# Все биты digit установлены (2^32 - 1)
DIGIT_MASK: Final[int] = DIGIT_BASE - 1

# Диапазон fixed-width конструктора: от int64 min до uint64 max
INT64_MIN: Final[int] = -(1 << 63)
UINT64_MAX: Final[int] = (1 << 64) - 1


# =============================================================================
# CANONICAL FORM
# =============================================================================


def trim(digits: list[int]) -> list[int]:
    """
    Удаление старших нулевых digits до минимальной длины 1.

    Мутирует переданный список и возвращает его же.

    Examples:
        >>> trim([5, 0, 0])
        [5]
        >>> trim([0, 0])
        [0]
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


def is_zero(digits: list[int]) -> bool:
    """Проверка canonical нуля."""
    return len(digits) == 1 and digits[0] == 0


def magnitude_from_int(value: int) -> list[int]:
    """
    Разложение неотрицательного int в canonical magnitude.

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"magnitude must be non-negative, got {value}")

    digits: list[int] = []
    while value:
        digits.append(value & DIGIT_MASK)
        value >>= DIGIT_BITS
    return trim(digits)


def magnitude_to_int(digits: list[int]) -> int:
    """Обратная сборка magnitude в int (старший digit первым)."""
    value = 0
    for digit in reversed(digits):
        value = (value << DIGIT_BITS) | digit
    return value


def split_fixed_width(value: int) -> list[int]:
    """
    Разложение 64-битного magnitude ровно в два digit (low, high) + trim.

    Examples:
        >>> split_fixed_width(1 << 63)
        [0, 2147483648]
    """
    return trim([value % DIGIT_BASE, value // DIGIT_BASE])


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: list[int], b: list[int]) -> int:
    """
    Трёхстороннее сравнение canonical magnitudes.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes_in_place(a: list[int], b: list[int]) -> list[int]:
    """
    a += b с переносом в base 2^32.

    Перенос из старшего digit добавляет новый digit.
    """
    if len(a) < len(b):
        a.extend([0] * (len(b) - len(a)))

    carry = 0
    for i in range(len(a)):
        if i >= len(b) and not carry:
            break
        total = a[i] + (b[i] if i < len(b) else 0) + carry
        a[i] = total & DIGIT_MASK
        carry = total >> DIGIT_BITS

    if carry:
        a.append(carry)
    return a


def sub_magnitudes_in_place(a: list[int], b: list[int]) -> list[int]:
    """
    a -= b с заёмом. Требует |a| >= |b|.

    Raises:
        ValueError: Если |a| < |b| (результат был бы отрицательным)
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError("sub_magnitudes requires minuend >= subtrahend")

    borrow = 0
    for i in range(len(a)):
        if i >= len(b) and not borrow:
            break
        diff = a[i] - (b[i] if i < len(b) else 0) - borrow
        if diff < 0:
            diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0
        a[i] = diff

    return trim(a)


def sub_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """|a| - |b| в новый список. Требует |a| >= |b|."""
    return sub_magnitudes_in_place(list(a), b)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    Schoolbook умножение, O(len(a) * len(b)).

    Длина результата = len(a) + len(b); для каждого digit b умножаем
    все digits a и накапливаем со сдвигом i. carry = product >> 32.
    """
    result = [0] * (len(a) + len(b))

    for i, b_digit in enumerate(b):
        if b_digit == 0:
            continue
        carry = 0
        for j, a_digit in enumerate(a):
            cur = result[i + j] + a_digit * b_digit + carry
            result[i + j] = cur & DIGIT_MASK
            carry = cur >> DIGIT_BITS
        result[i + len(a)] = carry

    return trim(result)


def mul_small_in_place(a: list[int], factor: int, addend: int = 0) -> list[int]:
    """
    a = a * factor + addend для factor, addend < 2^32.

    Multiply-accumulate для разбора decimal chunks.
    """
    carry = addend
    for i in range(len(a)):
        cur = a[i] * factor + carry
        a[i] = cur & DIGIT_MASK
        carry = cur >> DIGIT_BITS

    if carry:
        a.append(carry)
    return trim(a)


# =============================================================================
# INCREMENT / DECREMENT
# =============================================================================


def increment_magnitude_in_place(a: list[int]) -> list[int]:
    """|a| + 1; переполнение всех digits добавляет старший digit 1."""
    for i in range(len(a)):
        if a[i] == DIGIT_MASK:
            a[i] = 0
        else:
            a[i] += 1
            return a

    a.append(1)
    return a


def decrement_magnitude_in_place(a: list[int]) -> list[int]:
    """
    |a| - 1 с заёмом. Требует |a| >= 1.

    Raises:
        ValueError: Если a == 0
    """
    if is_zero(a):
        raise ValueError("cannot decrement zero magnitude")

    for i in range(len(a)):
        if a[i] == 0:
            a[i] = DIGIT_MASK
        else:
            a[i] -= 1
            break

    return trim(a)


# =============================================================================
# БИТОВЫЕ СДВИГИ MAGNITUDE
# =============================================================================


def shift_magnitude_left(a: list[int], bits: int) -> list[int]:
    """|a| << bits в новый список (bits >= 0)."""
    whole, rem = divmod(bits, DIGIT_BITS)
    result = [0] * whole + list(a)
    if rem:
        carry = 0
        for i in range(whole, len(result)):
            cur = result[i]
            result[i] = ((cur << rem) & DIGIT_MASK) | carry
            carry = cur >> (DIGIT_BITS - rem)
        result.append(carry)
    return trim(result)


def shift_magnitude_right(a: list[int], bits: int) -> list[int]:
    """|a| >> bits в новый список (bits >= 0). Сдвиг за пределы даёт [0]."""
    whole, rem = divmod(bits, DIGIT_BITS)
    if whole >= len(a):
        return [0]

    result = list(a[whole:])
    if rem:
        for i in range(len(result)):
            high = result[i + 1] if i + 1 < len(result) else 0
            result[i] = (result[i] >> rem) | ((high << (DIGIT_BITS - rem)) & DIGIT_MASK)
    return trim(result)
