"""
Domain value objects.

BigInteger и его валидированное представление DigitRepresentation.
"""

from src.bigint.domain.big_integer import BigInteger, DivisionResult, to_string
from src.bigint.domain.representation import DigitRepresentation

__all__ = [
    "BigInteger",
    "DivisionResult",
    "DigitRepresentation",
    "to_string",
]
