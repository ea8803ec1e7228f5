from __future__ import annotations

from enum import Enum

type UnscaledValue = int
type Magnitude = int
type Scale = int


class Sign(Enum):
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    @classmethod
    def from_int(cls, value: int) -> Sign:
        if value < 0:
            return Sign.NEGATIVE
        elif value > 0:
            return Sign.POSITIVE
        else:
            return Sign.ZERO

    @classmethod
    def from_decimal_sign(cls, sign_bit: int, magnitude: Magnitude) -> Sign:
        "Map the sign bit of `Decimal.as_tuple()` to a Sign, folding -0 into ZERO"
        if magnitude == 0:
            return Sign.ZERO
        return Sign.NEGATIVE if sign_bit else Sign.POSITIVE

    @property
    def decimal_sign(self) -> int:
        return 1 if self is Sign.NEGATIVE else 0


class DecodePolicy(Enum):
    RELAXED = "relaxed"
    STRICT = "strict"

    @classmethod
    def from_string(cls, value: str) -> DecodePolicy:
        try:
            return cls[value.upper()]
        except KeyError as e:
            raise ValueError(f"'{value}' is not a valid DecodePolicy.") from e
