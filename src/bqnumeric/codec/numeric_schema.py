from pydantic import BaseModel

from bqnumeric.codec.numeric_value import NumericValue
from bqnumeric.utils.numbers import format_decimal
from bqnumeric.utils.numeric_types import DecodePolicy


class NumericSchema(BaseModel):
    value: str

    def to_numeric(self) -> NumericValue:
        return NumericValue(self.value)

    def to_bytes(self) -> bytes:
        return self.to_numeric().to_bytes()

    @classmethod
    def from_numeric(cls, numeric_value: NumericValue) -> "NumericSchema":
        return cls(value=format_decimal(numeric_value.to_decimal(trim=True)))

    @classmethod
    def from_bytes(
        cls, numeric_bytes: bytes, policy: DecodePolicy = DecodePolicy.RELAXED
    ) -> "NumericSchema":
        return cls.from_numeric(NumericValue.from_bytes(numeric_bytes, policy))
