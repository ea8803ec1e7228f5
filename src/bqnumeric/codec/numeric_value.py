from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import ClassVar

from bqnumeric.codec import big_int, scale_normalizer, twos_complement
from bqnumeric.codec.exceptions import InvalidBytesError, InvalidDecimalError
from bqnumeric.utils.numbers import format_decimal
from bqnumeric.utils.numeric_types import DecodePolicy, Magnitude, Sign, UnscaledValue


def as_decimal(value: Decimal | int | str) -> Decimal:
    # bool is an int subclass but never a meaningful NUMERIC value
    if isinstance(value, bool) or not isinstance(value, Decimal | int | str):
        raise InvalidDecimalError(
            f"Expected a Decimal, int or str, got {type(value).__name__}: {value!r}"
        )
    try:
        decimal_value = Decimal(value)
    except InvalidOperation as e:
        raise InvalidDecimalError(f"'{value}' is not a valid decimal number.") from e
    if not decimal_value.is_finite():
        raise InvalidDecimalError(f"Cannot encode a non-finite value: {decimal_value}")
    return decimal_value


class NumericValue:
    SCALE: ClassVar[int] = scale_normalizer.NUMERIC_SCALE
    MAX_PRECISION: ClassVar[int] = scale_normalizer.NUMERIC_PRECISION
    MAX_VALUE: ClassVar[Decimal] = Decimal("99999999999999999999999999999.999999999")
    MIN_VALUE: ClassVar[Decimal] = Decimal("-99999999999999999999999999999.999999999")

    def __init__(self, value: Decimal | int | str) -> None:
        self._sign, self._magnitude = scale_normalizer.normalize(as_decimal(value))
        self._numeric_bytes: bytes | None = None

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def magnitude(self) -> Magnitude:
        return self._magnitude

    @property
    def unscaled(self) -> UnscaledValue:
        return big_int.to_signed_int(self.sign, self.magnitude)

    @property
    def value(self) -> Decimal:
        return scale_normalizer.denormalize(self.sign, self.magnitude)

    def to_decimal(self, trim: bool = False) -> Decimal:
        return scale_normalizer.denormalize(self.sign, self.magnitude, trim=trim)

    @classmethod
    def from_unscaled(cls, unscaled: UnscaledValue) -> NumericValue:
        sign, magnitude = big_int.from_signed_int(unscaled)
        return cls(scale_normalizer.denormalize(sign, magnitude))

    @classmethod
    def from_bytes(
        cls, numeric_bytes: bytes, policy: DecodePolicy = DecodePolicy.RELAXED
    ) -> NumericValue:
        if not isinstance(numeric_bytes, bytes | bytearray | memoryview):
            raise InvalidBytesError(
                f"Expected a bytes-like object, got {type(numeric_bytes).__name__}."
            )
        numeric_bytes = bytes(numeric_bytes)
        numeric_value = cls.from_unscaled(twos_complement.unpack(numeric_bytes, policy))
        # relaxed input may be sign-extended, so only strict input is already canonical
        if policy is DecodePolicy.STRICT:
            numeric_value._numeric_bytes = numeric_bytes
        return numeric_value

    def to_bytes(self) -> bytes:
        if self._numeric_bytes is not None:
            return self._numeric_bytes
        numeric_bytes = twos_complement.pack(self.unscaled)
        self._numeric_bytes = numeric_bytes
        return numeric_bytes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumericValue):
            return NotImplemented
        return self.unscaled == other.unscaled

    def __hash__(self) -> int:
        return hash(self.unscaled)

    def __repr__(self) -> str:
        return f"NumericValue('{self}')"

    def __str__(self) -> str:
        return format_decimal(self.to_decimal(trim=True))

