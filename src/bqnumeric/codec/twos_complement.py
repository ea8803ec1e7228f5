"""
Minimal little-endian two's-complement packing of signed integers.

This is the layout Java's `BigInteger.toByteArray()` produces, reversed to
little-endian, which is what the NUMERIC column of the row-insertion API
expects:

>>> pack(0).hex()
'00'
>>> pack(127).hex(), pack(128).hex()
('7f', '8000')
>>> pack(-128).hex(), pack(-129).hex()
('80', '7fff')
>>> unpack(bytes.fromhex('7fff'))
-129

A sign byte (0x00 or 0xFF) is appended only when the top bit of the natural
magnitude would otherwise be read as the wrong sign.
"""

from bqnumeric.codec.exceptions import InvalidBytesError
from bqnumeric.utils.numeric_types import DecodePolicy, UnscaledValue

BYTE_ORDER = "little"


def signed_byte_length(value: UnscaledValue) -> int:
    "Smallest byte count holding `value` as a two's-complement integer"
    # ~value == -value - 1, the largest magnitude a negative width can hold
    magnitude_bits = (~value).bit_length() if value < 0 else value.bit_length()
    return (magnitude_bits + 1 + 7) // 8


def pack(value: UnscaledValue) -> bytes:
    if value == 0:
        return b"\x00"
    return value.to_bytes(signed_byte_length(value), byteorder=BYTE_ORDER, signed=True)


def unpack(data: bytes, policy: DecodePolicy = DecodePolicy.RELAXED) -> UnscaledValue:
    if len(data) == 0:
        raise InvalidBytesError("Cannot decode an empty byte sequence.")
    value = int.from_bytes(data, byteorder=BYTE_ORDER, signed=True)
    if policy is DecodePolicy.STRICT and len(data) != signed_byte_length(value):
        raise InvalidBytesError(
            f"Non-minimal encoding: {len(data)} bytes given, "
            f"{signed_byte_length(value)} needed for {value}."
        )
    return value
