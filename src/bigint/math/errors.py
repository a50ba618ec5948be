"""
Errors — иерархия исключений BigInteger

Все ошибки синхронные и не восстанавливаются внутри библиотеки:
вызывающий код либо валидирует вход заранее, либо обрабатывает исключение.
"""


class BigIntegerError(Exception):
    """Базовый класс всех ошибок арифметики произвольной точности."""
    pass


class InvalidArgument(BigIntegerError, ValueError):
    """
    Невалидный аргумент.

    Возникает при:
    1. Пустой строке, одиночном знаке или нецифровом символе в decimal-строке
    2. Значении вне диапазона fixed-width конструктора
    3. Отрицательном shift count
    4. Нарушении canonical form в digit representation
    """
    pass


class DivisionByZero(BigIntegerError, ZeroDivisionError):
    """Деление или взятие остатка при нулевом делителе (short и long path)."""
    pass
