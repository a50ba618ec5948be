"""
Тесты для BigInteger

Проверяет:
1. Конструкторы: fixed-width int, decimal str, копия
2. Сложение/вычитание во всех комбинациях знаков
3. Умножение и усекающее деление (short и long path)
4. Bitwise операции и сдвиги с two's-complement семантикой
5. Increment/decrement (prefix и postfix)
6. Сравнение и вывод
7. Mutable-builder семантику in-place операторов
"""

import pytest

from src.bigint import (
    BigInteger,
    BigIntegerError,
    DigitRepresentation,
    DivisionByZero,
    DivisionResult,
    InvalidArgument,
    to_string,
)

INT64_MIN_TEXT = "-9223372036854775808"
UINT64_MAX_TEXT = "18446744073709551615"


# =============================================================================
# ТЕСТЫ: Конструкторы
# =============================================================================


class TestConstruction:
    """Конструкторы BigInteger."""

    def test_default_is_zero(self) -> None:
        """BigInteger() == 0."""
        assert BigInteger() == 0
        assert str(BigInteger()) == "0"

    def test_from_int64_min(self) -> None:
        """Минимальное int64 без переполнения."""
        assert str(BigInteger(-(2**63))) == INT64_MIN_TEXT

    def test_from_uint64_max(self) -> None:
        """Максимальное uint64."""
        assert str(BigInteger(2**64 - 1)) == UINT64_MAX_TEXT

    def test_from_int_uses_two_digits(self) -> None:
        """Fixed-width значение раскладывается в два digit и обрезается."""
        assert BigInteger(2**63).to_representation().digits == [0, 2**31]
        assert BigInteger(7).to_representation().digits == [7]

    @pytest.mark.parametrize("value", [2**64, -(2**63) - 1])
    def test_int_out_of_range_raises(self, value: int) -> None:
        """Вне fixed-width диапазона — только через строку."""
        with pytest.raises(InvalidArgument, match="outside fixed-width range"):
            BigInteger(value)

    def test_from_string(self) -> None:
        """Десятичная строка со знаком."""
        assert str(BigInteger("-123456789012345678901234567890")) == "-123456789012345678901234567890"
        assert str(BigInteger("+17")) == "17"

    def test_minus_zero_string(self) -> None:
        """"-0" равно нулю и печатается как "0"."""
        value = BigInteger("-0")
        assert value == 0
        assert str(value) == "0"

    @pytest.mark.parametrize("text", ["", "-", "+", "12x", "1 2"])
    def test_invalid_string_raises(self, text: str) -> None:
        """InvalidArgument для невалидных строк."""
        with pytest.raises(InvalidArgument):
            BigInteger(text)

    def test_invalid_argument_is_value_error(self) -> None:
        """InvalidArgument совместим с ValueError."""
        with pytest.raises(ValueError):
            BigInteger("abc")
        assert issubclass(InvalidArgument, BigIntegerError)

    @pytest.mark.parametrize("value", [1.5, None, True, b"12"])
    def test_unsupported_type_raises(self, value: object) -> None:
        """float, None, bool, bytes не поддерживаются."""
        with pytest.raises(InvalidArgument, match="cannot construct"):
            BigInteger(value)  # type: ignore[arg-type]

    def test_copy_constructor_is_independent(self) -> None:
        """Копия не разделяет digits."""
        original = BigInteger("4294967296")
        copy = BigInteger(original)
        copy += 1
        assert original == BigInteger("4294967296")
        assert copy == BigInteger("4294967297")


class TestRepresentation:
    """from_digits / to_representation."""

    def test_from_digits(self) -> None:
        """Little-endian digits."""
        assert BigInteger.from_digits([0, 1], negative=True) == BigInteger("-4294967296")

    def test_from_digits_trims(self) -> None:
        """Canonical form после построения."""
        value = BigInteger.from_digits([5, 0, 0])
        assert value.to_representation() == DigitRepresentation(negative=False, digits=[5])

    def test_from_digits_negative_zero(self) -> None:
        """Отрицательный ноль нормализуется."""
        value = BigInteger.from_digits([0, 0], negative=True)
        assert value.to_representation().negative is False
        assert value.sign == 0

    @pytest.mark.parametrize("digits", [[], [2**32], [-1]])
    def test_from_digits_invalid_raises(self, digits: list[int]) -> None:
        """Пустой список или digit вне диапазона."""
        with pytest.raises(InvalidArgument, match="invalid digit representation"):
            BigInteger.from_digits(digits)

    def test_from_digits_non_int_raises(self) -> None:
        """Digits не-int типов не приводятся молча."""
        with pytest.raises(InvalidArgument, match="invalid digit representation"):
            BigInteger.from_digits(["5", True, 2.0])  # type: ignore[list-item]

    def test_snapshot_is_detached(self) -> None:
        """Snapshot не меняется вместе с числом."""
        value = BigInteger(5)
        snapshot = value.to_representation()
        value += 1
        assert snapshot.digits == [5]


# =============================================================================
# ТЕСТЫ: Сложение / вычитание
# =============================================================================


class TestAddition:
    """Все четыре комбинации знаков."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (5, 3, 8),
            (-5, -3, -8),
            (5, -3, 2),
            (-5, 3, -2),
            (3, -5, -2),
            (-3, 5, 2),
            (5, -5, 0),
            (-5, 5, 0),
        ],
    )
    def test_sign_combinations(self, a: int, b: int, expected: int) -> None:
        """a + b."""
        assert BigInteger(a) + BigInteger(b) == expected

    def test_carry_into_new_digit(self) -> None:
        """(2^32 - 1) + 1 == 2^32."""
        assert BigInteger(2**32 - 1) + 1 == BigInteger("4294967296")

    def test_equal_magnitudes_give_canonical_zero(self) -> None:
        """Ноль без знака."""
        result = BigInteger(-7) + 7
        assert result.sign == 0
        assert str(result) == "0"

    def test_add_self(self) -> None:
        """x += x."""
        value = BigInteger(2**32 - 1)
        value += value
        assert value == BigInteger(2**33 - 2)


class TestSubtraction:
    """Вычитание."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (5, 3, 2),
            (3, 5, -2),
            (-5, -3, -2),
            (-3, -5, 2),
            (5, -3, 8),
            (-5, 3, -8),
            (4, 4, 0),
            (-4, -4, 0),
        ],
    )
    def test_sign_combinations(self, a: int, b: int, expected: int) -> None:
        """a - b."""
        assert BigInteger(a) - BigInteger(b) == expected

    def test_zero_minus_one(self) -> None:
        """0 - 1 == -1."""
        result = BigInteger(0) - BigInteger(1)
        assert result == -1
        assert str(result) == "-1"

    def test_borrow_across_digits(self) -> None:
        """2^64 - 1 через заём."""
        assert BigInteger("18446744073709551616") - 1 == BigInteger(2**64 - 1)

    def test_subtract_self(self) -> None:
        """x -= x == 0."""
        value = BigInteger("-98765432109876543210")
        value -= value
        assert value == 0
        assert str(value) == "0"

    def test_reflected(self) -> None:
        """int - BigInteger."""
        assert 10 - BigInteger(3) == 7


# =============================================================================
# ТЕСТЫ: Умножение / деление
# =============================================================================


class TestMultiplication:
    """Умножение."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [(6, 7, 42), (-6, 7, -42), (6, -7, -42), (-6, -7, 42), (-6, 0, 0)],
    )
    def test_sign(self, a: int, b: int, expected: int) -> None:
        """Знак = XOR знаков."""
        assert BigInteger(a) * BigInteger(b) == expected

    def test_zero_product_not_negative(self) -> None:
        """-x * 0 печатается как "0"."""
        assert str(BigInteger(-6) * 0) == "0"

    def test_large(self) -> None:
        """Многоразрядное произведение."""
        a = 123456789012345678901234567890
        b = 987654321098765432109876543210
        assert str(BigInteger(str(a)) * BigInteger(str(b))) == str(a * b)

    def test_reflected(self) -> None:
        """int * BigInteger."""
        assert 3 * BigInteger(-4) == -12


class TestDivision:
    """Усекающее деление."""

    @pytest.mark.parametrize(
        "a, b, quotient, remainder",
        [
            (7, 2, 3, 1),
            (-7, 2, -3, -1),
            (7, -2, -3, 1),
            (-7, -2, 3, -1),
            (6, 3, 2, 0),
            (1, 5, 0, 1),
            (-1, 5, 0, -1),
        ],
    )
    def test_truncating_signs(self, a: int, b: int, quotient: int, remainder: int) -> None:
        """Частное к нулю, остаток со знаком делимого."""
        assert BigInteger(a) / BigInteger(b) == quotient
        assert BigInteger(a) // BigInteger(b) == quotient
        assert BigInteger(a) % BigInteger(b) == remainder

    def test_long_division_reconstruction(self) -> None:
        """123456789012345678901234567890 / 987654321."""
        a = BigInteger("123456789012345678901234567890")
        b = BigInteger(987654321)
        q, r = BigInteger.divide(a, b)
        assert q * b + r == a
        assert abs(r) < abs(b)
        assert str(q) == str(123456789012345678901234567890 // 987654321)
        assert str(r) == str(123456789012345678901234567890 % 987654321)

    def test_multi_digit_divisor(self) -> None:
        """Long path с отрицательными операндами."""
        a_int = -(3**150)
        b_int = 2**70 + 12345
        a = BigInteger(str(a_int))
        b = BigInteger(str(b_int))
        result = BigInteger.divide(a, b)
        assert isinstance(result, DivisionResult)
        assert str(result.quotient) == str(-(abs(a_int) // b_int))
        assert str(result.remainder) == str(-(abs(a_int) % b_int))
        assert result.quotient * b + result.remainder == a

    def test_dividend_smaller_than_divisor(self) -> None:
        """|a| < |b|: частное 0, остаток = делимое."""
        a = BigInteger(-5)
        b = BigInteger("100000000000000000000")
        assert a / b == 0
        assert a % b == -5

    def test_divmod(self) -> None:
        """divmod() возвращает DivisionResult."""
        assert divmod(BigInteger(-7), 2) == (-3, -1)
        assert divmod(7, BigInteger(-2)) == (-3, 1)

    def test_reflected(self) -> None:
        """int / BigInteger и int % BigInteger."""
        assert 10 / BigInteger(3) == 3
        assert 10 % BigInteger(3) == 1

    def test_division_by_zero_short(self) -> None:
        """Short path."""
        with pytest.raises(DivisionByZero):
            BigInteger(5) / 0
        with pytest.raises(DivisionByZero):
            BigInteger(5) % BigInteger(0)

    def test_division_by_zero_long(self) -> None:
        """Многоразрядное делимое, нулевой делитель."""
        with pytest.raises(ZeroDivisionError):
            BigInteger("18446744073709551616") / BigInteger("-0")

    def test_division_by_zero_divmod(self) -> None:
        """divmod с нулём."""
        with pytest.raises(DivisionByZero):
            divmod(BigInteger(1), 0)


# =============================================================================
# ТЕСТЫ: Bitwise
# =============================================================================


class TestBitwise:
    """Two's-complement семантика бесконечной точности."""

    def test_and_or_negative(self) -> None:
        """-5 & 3 == 3, -5 | 3 == -5."""
        assert BigInteger(-5) & BigInteger(3) == 3
        assert BigInteger(-5) | BigInteger(3) == -5

    def test_xor(self) -> None:
        """-5 ^ 3 == -8."""
        assert BigInteger(-5) ^ BigInteger(3) == -8

    def test_reflected(self) -> None:
        """int & BigInteger."""
        assert 3 & BigInteger(-5) == 3
        assert 3 | BigInteger(-5) == -5
        assert 3 ^ BigInteger(-5) == -8

    def test_invert(self) -> None:
        """~x == -x - 1."""
        assert ~BigInteger(0) == -1
        assert ~BigInteger(-1) == 0
        assert ~BigInteger(2**32 - 1) == BigInteger("-4294967296")
        assert ~BigInteger("-4294967296") == 2**32 - 1

    def test_self_identities(self) -> None:
        """a & a == a, a | a == a, a ^ a == 0."""
        a = BigInteger("-340282366920938463463374607431768211457")
        assert a & a == a
        assert a | a == a
        assert a ^ a == 0


class TestShifts:
    """Сдвиги."""

    def test_left(self) -> None:
        """Умножение на степень двойки."""
        assert BigInteger(1) << 64 == BigInteger("18446744073709551616")
        assert BigInteger(-3) << 33 == BigInteger(-3 * 2**33)

    def test_right_floors(self) -> None:
        """Арифметический сдвиг к минус бесконечности."""
        assert BigInteger(-5) >> 1 == -3
        assert BigInteger(5) >> 1 == 2
        assert BigInteger(-1) >> 1 == -1

    def test_right_drops_everything(self) -> None:
        """Сдвиг за пределы всех digits: 0 для любого знака."""
        assert BigInteger(123) >> 1000 == 0
        assert BigInteger(-123) >> 1000 == 0
        assert BigInteger(-123) >> 32 == 0
        assert (BigInteger(-123) >> 32).sign == 0

    def test_right_inside_last_digit_floors(self) -> None:
        """Сдвиг, оставляющий digits, округляет к минус бесконечности."""
        assert BigInteger(-123) >> 31 == -1
        assert BigInteger(-123) >> 1 == -62

    def test_roundtrip(self) -> None:
        """(a << k) >> k == a."""
        for text in ("12345678901234567890", "-12345678901234567890", "-1", "0"):
            for k in (0, 1, 31, 32, 33, 100):
                a = BigInteger(text)
                assert (a << k) >> k == a

    def test_negative_shift_raises(self) -> None:
        """Отрицательный сдвиг."""
        with pytest.raises(InvalidArgument):
            BigInteger(1) << -1
        with pytest.raises(InvalidArgument):
            BigInteger(1) >> -1

    def test_non_int_shift_count(self) -> None:
        """Сдвиг только на int."""
        with pytest.raises(TypeError):
            BigInteger(1) << 1.5  # type: ignore[operator]


# =============================================================================
# ТЕСТЫ: Унарные операторы и increment/decrement
# =============================================================================


class TestUnary:
    """Унарные +, -, abs."""

    def test_pos_is_copy(self) -> None:
        """+x — независимая копия."""
        a = BigInteger(5)
        b = +a
        b += 1
        assert a == 5

    def test_neg(self) -> None:
        """-x."""
        assert -BigInteger(5) == -5
        assert -BigInteger(-5) == 5

    def test_neg_zero(self) -> None:
        """-0 == 0 и печатается как "0"."""
        assert -BigInteger(0) == 0
        assert str(-BigInteger(0)) == "0"

    def test_abs(self) -> None:
        """abs()."""
        assert abs(BigInteger(INT64_MIN_TEXT)) == BigInteger("9223372036854775808")


class TestIncrementDecrement:
    """Аналоги ++ / --."""

    def test_prefix_returns_self(self) -> None:
        """increment() мутирует и возвращает self."""
        value = BigInteger(41)
        assert value.increment() is value
        assert value == 42

    def test_postfix_returns_previous(self) -> None:
        """post_increment() возвращает прежнее значение."""
        value = BigInteger(41)
        previous = value.post_increment()
        assert previous == 41
        assert value == 42

    def test_cross_zero(self) -> None:
        """-1 → 0 → -1."""
        value = BigInteger(-1)
        value.increment()
        assert value == 0
        assert str(value) == "0"
        value.decrement()
        assert value == -1

    def test_digit_boundaries(self) -> None:
        """Перенос и заём через digit."""
        value = BigInteger(2**32 - 1)
        value.increment()
        assert value == BigInteger("4294967296")
        value.decrement()
        assert value == 2**32 - 1

    def test_negative_boundaries(self) -> None:
        """-(2^32) + 1 и -(2^32 - 1) - 1."""
        value = BigInteger("-4294967296")
        value.increment()
        assert value == -(2**32 - 1)
        value.decrement()
        assert value == BigInteger("-4294967296")

    def test_post_decrement(self) -> None:
        """post_decrement() возвращает прежнее значение."""
        value = BigInteger(0)
        assert value.post_decrement() == 0
        assert value == -1


# =============================================================================
# ТЕСТЫ: Сравнение
# =============================================================================


class TestComparison:
    """Трёхстороннее сравнение и производные операторы."""

    def test_zero_signs_equal(self) -> None:
        """Нули равны независимо от способа получения."""
        assert BigInteger("-0") == BigInteger(0)
        assert BigInteger(0).compare(-BigInteger(0)) == 0

    def test_sign_decides(self) -> None:
        """Положительное больше отрицательного."""
        assert BigInteger(1) > BigInteger("-100000000000000000000")
        assert BigInteger(-1) < 0

    def test_length_decides(self) -> None:
        """Длина magnitude; для отрицательных инверсия."""
        big = BigInteger("4294967296")
        assert big > 2**32 - 1
        assert -big < -(2**32 - 1)

    def test_all_operators(self) -> None:
        """Шесть операторов из одного примитива."""
        a, b = BigInteger(-3), BigInteger(2)
        assert a < b and a <= b and a != b
        assert b > a and b >= a
        assert not (a == b)
        assert a <= BigInteger(-3) and a >= BigInteger(-3)

    def test_compare_values(self) -> None:
        """compare() возвращает -1/0/1."""
        assert BigInteger(-2).compare(-3) == 1
        assert BigInteger(-3).compare(-2) == -1
        assert BigInteger(7).compare(7) == 0

    def test_compare_unsupported_raises(self) -> None:
        """compare() с неподдерживаемым типом."""
        with pytest.raises(InvalidArgument):
            BigInteger(1).compare("1")  # type: ignore[arg-type]

    def test_eq_unsupported_is_false(self) -> None:
        """== с посторонним типом — False."""
        assert (BigInteger(1) == "1") is False
        assert BigInteger(1) != 1.0

    def test_unhashable(self) -> None:
        """Mutable value не хэшируется."""
        with pytest.raises(TypeError):
            hash(BigInteger(1))


class TestWideIntOperands:
    """int операнды вне fixed-width диапазона конструктора."""

    def test_eq_with_huge_int_is_bool(self) -> None:
        """== с int > 2^64 возвращает bool, не исключение."""
        assert (BigInteger(1) == 2**64) is False
        assert (BigInteger(1) != 2**64) is True
        assert BigInteger("18446744073709551616") == 2**64
        assert BigInteger("-18446744073709551616") == -(2**64)

    def test_ordering_with_huge_int(self) -> None:
        """Сравнение с int любой величины."""
        assert BigInteger(1) < 2**100
        assert BigInteger(-1) > -(2**100)
        assert BigInteger(5).compare(2**64) == -1
        assert BigInteger(5).compare(-(2**63) - 1) == 1

    def test_arithmetic_with_huge_int(self) -> None:
        """Бинарные и reflected операторы с int > 2^64."""
        assert BigInteger(1) + 2**64 == 2**64 + 1
        assert 2**64 - BigInteger(1) == 2**64 - 1
        assert BigInteger(3) * 2**70 == 3 * 2**70
        assert BigInteger("100000000000000000000000") / 2**64 == 10**23 // 2**64
        assert BigInteger(-1) & 2**80 == 2**80

    def test_in_place_with_huge_int(self) -> None:
        """In-place оператор с int > 2^64."""
        value = BigInteger(1)
        value -= 2**64
        assert value == 1 - 2**64
        assert str(value) == "-18446744073709551615"

    def test_constructor_keeps_range_check(self) -> None:
        """Конструктор по-прежнему ограничен fixed-width диапазоном."""
        with pytest.raises(InvalidArgument, match="outside fixed-width range"):
            BigInteger(2**64)


# =============================================================================
# ТЕСТЫ: Вывод и утилиты
# =============================================================================


class TestOutput:
    """str / repr / format / int."""

    def test_to_string(self) -> None:
        """to_string() == str()."""
        value = BigInteger(INT64_MIN_TEXT)
        assert to_string(value) == INT64_MIN_TEXT
        assert str(value) == INT64_MIN_TEXT

    def test_repr(self) -> None:
        """repr содержит десятичную запись."""
        assert repr(BigInteger(-12)) == "BigInteger('-12')"

    def test_format(self) -> None:
        """Ширина и выравнивание."""
        assert f"{BigInteger(-42):>6}" == "   -42"
        assert f"{BigInteger(7):<3}|" == "7  |"
        assert f"{BigInteger(7)}" == "7"

    def test_int(self) -> None:
        """Точная конверсия в int."""
        text = "-123456789012345678901234567890"
        assert int(BigInteger(text)) == int(text)

    def test_bool_and_sign(self) -> None:
        """bool() и sign."""
        assert not BigInteger(0)
        assert BigInteger(-3)
        assert BigInteger(-3).sign == -1
        assert BigInteger(3).sign == 1
        assert BigInteger(0).sign == 0
        assert BigInteger(0).is_zero()


# =============================================================================
# ТЕСТЫ: Mutable-builder
# =============================================================================


class TestInPlaceSemantics:
    """In-place операторы мутируют приёмник."""

    def test_inplace_returns_same_object(self) -> None:
        """x += y сохраняет identity."""
        value = BigInteger(5)
        original_id = id(value)
        value += 1
        value *= 3
        value <<= 2
        value //= 4
        value %= 100
        value &= 0xFF
        assert id(value) == original_id
        assert value == 18

    def test_alias_sees_mutation(self) -> None:
        """Алиас видит изменение; copy() — нет."""
        a = BigInteger(5)
        alias = a
        detached = a.copy()
        alias += 1
        assert a == 6
        assert detached == 5

    def test_binary_operator_copies(self) -> None:
        """a + b не меняет a."""
        a = BigInteger(5)
        _ = a + 1
        _ = a << 10
        _ = ~a
        assert a == 5

    def test_swap(self) -> None:
        """swap() меняет значения местами."""
        a, b = BigInteger(1), BigInteger("-4294967296")
        a.swap(b)
        assert a == BigInteger("-4294967296")
        assert b == 1

    def test_unsupported_operand_type(self) -> None:
        """Неподдерживаемый операнд → TypeError."""
        with pytest.raises(TypeError):
            BigInteger(1) + 1.5  # type: ignore[operator]
        with pytest.raises(TypeError):
            BigInteger(1) * "2"  # type: ignore[operator]
