"""
DigitRepresentation — валидированный snapshot внутреннего представления

Immutable Pydantic модель (sign flag + little-endian digits base 2^32).
Используется для построения BigInteger из готовых digits и для
инспекции представления без доступа к приватному состоянию.

ИНВАРИАНТЫ:
1. Каждый digit — int (строгая проверка типа) в [0, 2^32)
2. Canonical form: digits обрезаются trim'ом, длина >= 1
3. Ноль всегда хранится с negative=False
"""

from typing import Any

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator

from src.bigint.math.magnitude import DIGIT_BASE, magnitude_to_int, trim


class DigitRepresentation(BaseModel):
    """
    Знак и magnitude в base 2^32.

    Value = (-1 if negative else 1) * Σ digits[i] * 2^(32*i)
    """

    negative: bool = Field(False, description="Sign flag (True для отрицательных)")
    digits: list[StrictInt] = Field(
        ..., min_length=1, description="Magnitude, little-endian digits base 2^32"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def normalize_zero_sign(cls, data: Any) -> Any:
        """Ноль не имеет знака."""
        if isinstance(data, dict) and data.get("negative"):
            digits = data.get("digits")
            if isinstance(digits, (list, tuple)) and digits and all(d == 0 for d in digits):
                return {**data, "negative": False}
        return data

    @field_validator("digits")
    @classmethod
    def validate_digit_range(cls, v: list[int]) -> list[int]:
        """Проверка диапазона digits и приведение к canonical form."""
        for i, digit in enumerate(v):
            if not 0 <= digit < DIGIT_BASE:
                raise ValueError(f"digit[{i}]={digit} outside [0, 2^32)")
        return trim(list(v))

    def to_int(self) -> int:
        """Точное значение как int."""
        value = magnitude_to_int(self.digits)
        return -value if self.negative else value
