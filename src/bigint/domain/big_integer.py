"""
BigInteger — знаковое целое произвольной точности

Drop-in замена fixed-width signed integer без переполнения:
арифметика (+, -, *, /, %), bitwise операции и сдвиги (two's-complement
семантика), increment/decrement, сравнение, десятичная запись.

Представление: sign flag + canonical magnitude (little-endian digits base 2^32).

Mutable-builder: in-place операторы (+=, *=, <<=, ...) мутируют приёмник
и возвращают его же; бинарные операторы копируют левый операнд.
Поэтому после `b = a` выражение `b += 1` меняет и `a`; для независимого
значения используйте copy().

Деление усекающее (к нулю), как у fixed-width целых:
    BigInteger(-7) / 2 == -3, BigInteger(-7) % 2 == -1
"""

from typing import NamedTuple, Union

from pydantic import ValidationError

from src.bigint.domain.representation import DigitRepresentation
from src.bigint.math.decimal_codec import format_decimal, parse_decimal
from src.bigint.math.division import divmod_magnitudes
from src.bigint.math.errors import InvalidArgument
from src.bigint.math.magnitude import (
    INT64_MIN,
    UINT64_MAX,
    add_magnitudes_in_place,
    compare_magnitudes,
    decrement_magnitude_in_place,
    increment_magnitude_in_place,
    is_zero,
    magnitude_from_int,
    magnitude_to_int,
    mul_magnitudes,
    split_fixed_width,
    sub_magnitudes,
    sub_magnitudes_in_place,
)
from src.bigint.math.twos_complement import (
    BITWISE_AND,
    BITWISE_OR,
    BITWISE_XOR,
    DigitOperation,
    SignedMagnitude,
    bitwise_combine,
    bitwise_invert,
    shift_left,
    shift_right,
)

Operand = Union["BigInteger", int]


# =============================================================================
# RESULT
# =============================================================================


class DivisionResult(NamedTuple):
    """
    Результат усекающего деления.

    dividend = divisor * quotient + remainder,
    знак remainder = знак dividend, |remainder| < |divisor|.
    """

    quotient: "BigInteger"
    remainder: "BigInteger"


# =============================================================================
# BIG INTEGER
# =============================================================================


class BigInteger:
    """
    Знаковое целое произвольной точности.

    Конструктор принимает:
    - int в диапазоне [INT64_MIN, UINT64_MAX] (fixed-width signed/unsigned)
    - str с десятичной записью: [+-]?[0-9]+
    - BigInteger (копия)

    Raises:
        InvalidArgument: Невалидная строка, int вне fixed-width диапазона,
            неподдерживаемый тип
    """

    __slots__ = ("_negative", "_digits")

    # Mutable value: не хэшируется
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: "int | str | BigInteger" = 0) -> None:
        self._negative = False
        self._digits = [0]

        if isinstance(value, BigInteger):
            self._assign(value._negative, list(value._digits))
        elif isinstance(value, str):
            self._assign(*parse_decimal(value))
        elif isinstance(value, int) and not isinstance(value, bool):
            if not INT64_MIN <= value <= UINT64_MAX:
                raise InvalidArgument(
                    f"{value} outside fixed-width range [{INT64_MIN}, {UINT64_MAX}]; "
                    f"use decimal text for larger values"
                )
            # abs() над int не переполняется, INT64_MIN безопасен
            self._assign(value < 0, split_fixed_width(abs(value)))
        else:
            raise InvalidArgument(
                f"cannot construct BigInteger from {type(value).__name__}"
            )

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    @classmethod
    def from_digits(cls, digits: list[int], negative: bool = False) -> "BigInteger":
        """
        Построение из little-endian digits base 2^32.

        Digits проходят валидацию DigitRepresentation и приводятся
        к canonical form.

        Raises:
            InvalidArgument: Digit вне [0, 2^32) или пустой список
        """
        try:
            rep = DigitRepresentation(negative=negative, digits=digits)
        except ValidationError as e:
            raise InvalidArgument(f"invalid digit representation: {e}") from e

        result = cls()
        result._assign(rep.negative, list(rep.digits))
        return result

    def to_representation(self) -> DigitRepresentation:
        """Snapshot текущего представления (копия digits)."""
        return DigitRepresentation(negative=self._negative, digits=list(self._digits))

    def _assign(self, negative: bool, digits: list[int]) -> "BigInteger":
        self._digits = digits
        self._negative = negative and not is_zero(digits)
        return self

    def _assign_signed(self, result: SignedMagnitude) -> "BigInteger":
        return self._assign(result.negative, result.digits)

    @staticmethod
    def _coerce(value: object) -> "BigInteger | None":
        """Операнд BigInteger или int любой величины; иначе None."""
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return BigInteger()._assign(value < 0, magnitude_from_int(abs(value)))
        return None

    def copy(self) -> "BigInteger":
        return BigInteger(self)

    def swap(self, other: "BigInteger") -> None:
        """Обмен состоянием с other."""
        self._negative, other._negative = other._negative, self._negative
        self._digits, other._digits = other._digits, self._digits

    # -------------------------------------------------------------------------
    # Сложение / вычитание
    # -------------------------------------------------------------------------

    def _accumulate(self, other_negative: bool, other_digits: list[int]) -> "BigInteger":
        """
        self += (-1)^other_negative * other_digits.

        Четыре комбинации знаков:
            (+) + (+), (-) + (-): сложение magnitudes, знак сохраняется
            (+) + (-), (-) + (+): вычитание меньшей magnitude из большей,
                знак большей; равные magnitudes дают canonical ноль
        """
        if self._negative == other_negative:
            add_magnitudes_in_place(self._digits, other_digits)
            return self

        cmp = compare_magnitudes(self._digits, other_digits)
        if cmp == 0:
            return self._assign(False, [0])
        if cmp > 0:
            sub_magnitudes_in_place(self._digits, other_digits)
            return self._assign(self._negative, self._digits)
        return self._assign(other_negative, sub_magnitudes(other_digits, self._digits))

    def __iadd__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._accumulate(rhs._negative, list(rhs._digits))

    def __isub__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._accumulate(not rhs._negative, list(rhs._digits))

    # -------------------------------------------------------------------------
    # Умножение / деление
    # -------------------------------------------------------------------------

    def __imul__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._assign(
            self._negative != rhs._negative, mul_magnitudes(self._digits, rhs._digits)
        )

    @staticmethod
    def divide(dividend: Operand, divisor: Operand) -> DivisionResult:
        """
        Усекающее деление с остатком.

        Знак частного = XOR знаков операндов, знак остатка = знак делимого.

        Raises:
            DivisionByZero: Если divisor == 0
        """
        a = BigInteger._coerce(dividend)
        b = BigInteger._coerce(divisor)
        if a is None or b is None:
            raise InvalidArgument("divide() operands must be BigInteger or int")

        quotient, remainder = divmod_magnitudes(a._digits, b._digits)
        return DivisionResult(
            BigInteger()._assign(a._negative != b._negative, quotient),
            BigInteger()._assign(a._negative, remainder),
        )

    def __itruediv__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        quotient = self.divide(self, rhs).quotient
        return self._assign(quotient._negative, quotient._digits)

    __ifloordiv__ = __itruediv__

    def __imod__(self, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        remainder = self.divide(self, rhs).remainder
        return self._assign(remainder._negative, remainder._digits)

    # -------------------------------------------------------------------------
    # Bitwise
    # -------------------------------------------------------------------------

    def _bitwise(self, operation: DigitOperation, other: Operand) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._assign_signed(
            bitwise_combine(operation, self._negative, self._digits, rhs._negative, rhs._digits)
        )

    def __iand__(self, other: Operand) -> "BigInteger":
        return self._bitwise(BITWISE_AND, other)

    def __ior__(self, other: Operand) -> "BigInteger":
        return self._bitwise(BITWISE_OR, other)

    def __ixor__(self, other: Operand) -> "BigInteger":
        return self._bitwise(BITWISE_XOR, other)

    def __ilshift__(self, bits: int) -> "BigInteger":
        if not isinstance(bits, int):
            return NotImplemented
        return self._assign_signed(shift_left(self._negative, self._digits, bits))

    def __irshift__(self, bits: int) -> "BigInteger":
        if not isinstance(bits, int):
            return NotImplemented
        return self._assign_signed(shift_right(self._negative, self._digits, bits))

    # -------------------------------------------------------------------------
    # Бинарные операторы: копия + in-place
    # -------------------------------------------------------------------------

    def _binary(self, other: object, inplace: str) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return getattr(self.copy(), inplace)(rhs)

    def _reflected(self, other: object, inplace: str) -> "BigInteger":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return getattr(lhs.copy(), inplace)(self)

    def __add__(self, other: Operand) -> "BigInteger":
        return self._binary(other, "__iadd__")

    def __radd__(self, other: int) -> "BigInteger":
        return self._reflected(other, "__iadd__")

    def __sub__(self, other: Operand) -> "BigInteger":
        return self._binary(other, "__isub__")

    def __rsub__(self, other: int) -> "BigInteger":
        return self._reflected(other, "__isub__")

    def __mul__(self, other: Operand) -> "BigInteger":
        return self._binary(other, "__imul__")

    def __rmul__(self, other: int) -> "BigInteger":
        return self._reflected(other, "__imul__")

    def __truediv__(self, other: Operand) -> "BigInteger":
        return self._binary(other, "__itruediv__")

    def __rtruediv__(self, other: int) -> "BigInteger":
        return self._reflected(other, "__itruediv__")

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: Operand) -> "BigInteger":
        return self._binary(other, "__imod__")

    def __rmod__(self, other: int) -> "BigInteger":
        return self._reflected(other, "__imod__")

    def __divmod__(self, other: Operand) -> DivisionResult:
        if self._coerce(other) is None:
            return NotImplemented
        return self.divide(self, other)

    def __rdivmod__(self, other: int) -> DivisionResult:
        if self._coerce(other) is None:
            return NotImplemented
        return self.divide(other, self)

    def __and__(self, other: Operand) -> "BigInteger":
        return self._binary(other, "__iand__")

    __rand__ = __and__

    def __or__(self, other: Operand) -> "BigInteger":
        return self._binary(other, "__ior__")

    __ror__ = __or__

    def __xor__(self, other: Operand) -> "BigInteger":
        return self._binary(other, "__ixor__")

    __rxor__ = __xor__

    def __lshift__(self, bits: int) -> "BigInteger":
        if not isinstance(bits, int):
            return NotImplemented
        return self.copy().__ilshift__(bits)

    def __rshift__(self, bits: int) -> "BigInteger":
        if not isinstance(bits, int):
            return NotImplemented
        return self.copy().__irshift__(bits)

    # -------------------------------------------------------------------------
    # Унарные операторы
    # -------------------------------------------------------------------------

    def __pos__(self) -> "BigInteger":
        return self.copy()

    def __neg__(self) -> "BigInteger":
        return BigInteger()._assign(not self._negative, list(self._digits))

    def __abs__(self) -> "BigInteger":
        return BigInteger()._assign(False, list(self._digits))

    def __invert__(self) -> "BigInteger":
        return BigInteger()._assign_signed(bitwise_invert(self._negative, self._digits))

    # -------------------------------------------------------------------------
    # Increment / decrement
    # -------------------------------------------------------------------------

    def increment(self) -> "BigInteger":
        """Prefix ++: мутирует и возвращает self."""
        if self._negative:
            decrement_magnitude_in_place(self._digits)
            return self._assign(True, self._digits)
        increment_magnitude_in_place(self._digits)
        return self

    def decrement(self) -> "BigInteger":
        """Prefix --: мутирует и возвращает self."""
        if self._negative or self.is_zero():
            increment_magnitude_in_place(self._digits)
            return self._assign(True, self._digits)
        decrement_magnitude_in_place(self._digits)
        return self

    def post_increment(self) -> "BigInteger":
        """Postfix ++: мутирует self, возвращает прежнее значение."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "BigInteger":
        """Postfix --: мутирует self, возвращает прежнее значение."""
        previous = self.copy()
        self.decrement()
        return previous

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: Operand) -> int:
        """
        Трёхстороннее сравнение: -1, 0 или +1.

        Нули равны независимо от знака. Разные знаки решают сразу;
        при одинаковом знаке сравниваются magnitudes, для отрицательных
        результат инвертируется.

        Raises:
            InvalidArgument: Если other не BigInteger и не int
        """
        rhs = self._coerce(other)
        if rhs is None:
            raise InvalidArgument(f"cannot compare BigInteger with {type(other).__name__}")

        if self.is_zero() and rhs.is_zero():
            return 0
        if self._negative != rhs._negative:
            return -1 if self._negative else 1

        cmp = compare_magnitudes(self._digits, rhs._digits)
        return -cmp if self._negative else cmp

    def _compare_or_none(self, other: object) -> "int | None":
        if self._coerce(other) is None:
            return None
        return self.compare(other)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        cmp = self._compare_or_none(other)
        return NotImplemented if cmp is None else cmp == 0

    def __ne__(self, other: object) -> bool:
        cmp = self._compare_or_none(other)
        return NotImplemented if cmp is None else cmp != 0

    def __lt__(self, other: Operand) -> bool:
        cmp = self._compare_or_none(other)
        return NotImplemented if cmp is None else cmp < 0

    def __le__(self, other: Operand) -> bool:
        cmp = self._compare_or_none(other)
        return NotImplemented if cmp is None else cmp <= 0

    def __gt__(self, other: Operand) -> bool:
        cmp = self._compare_or_none(other)
        return NotImplemented if cmp is None else cmp > 0

    def __ge__(self, other: Operand) -> bool:
        cmp = self._compare_or_none(other)
        return NotImplemented if cmp is None else cmp >= 0

    # -------------------------------------------------------------------------
    # Утилиты и вывод
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return is_zero(self._digits)

    @property
    def sign(self) -> int:
        """-1, 0 или +1."""
        if self.is_zero():
            return 0
        return -1 if self._negative else 1

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        value = magnitude_to_int(self._digits)
        return -value if self._negative else value

    def __str__(self) -> str:
        return format_decimal(self._negative, self._digits)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def __format__(self, format_spec: str) -> str:
        """Выравнивание и ширина применяются к десятичной записи."""
        return format(str(self), format_spec)


def to_string(value: BigInteger) -> str:
    """Canonical десятичная запись value."""
    return str(value)
