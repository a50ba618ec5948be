"""
Arbitrary-precision signed integer.

Pure-Python знаковое целое произвольной точности: sign-magnitude
представление base 2^32, schoolbook умножение, Knuth Algorithm D,
two's-complement bitwise операции и десятичная запись.
"""

from src.bigint.domain import BigInteger, DigitRepresentation, DivisionResult, to_string
from src.bigint.math.errors import BigIntegerError, DivisionByZero, InvalidArgument

__all__ = [
    "BigInteger",
    "DigitRepresentation",
    "DivisionResult",
    "to_string",
    "BigIntegerError",
    "DivisionByZero",
    "InvalidArgument",
]
