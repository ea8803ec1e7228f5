"""
Encode and decode BigQuery NUMERIC values for the Storage Write API.

The wire form is the unscaled value (value * 10**9) as a minimal
little-endian two's-complement integer, with no prefix or tag:

>>> encode_bigdecimal_to_bigquery_bytes(Decimal("1.2")).hex()
'008c8647'
>>> decode_bigquery_bytes_to_bigdecimal(bytes.fromhex("008c8647"))
Decimal('1.200000000')
>>> decode_bigquery_bytes_to_bigdecimal(bytes.fromhex("008c8647"), trim=True)
Decimal('1.2')
"""

import logging
from decimal import Decimal

from bqnumeric.codec.exceptions import DecodeError, EncodeError
from bqnumeric.codec.numeric_value import NumericValue
from bqnumeric.utils.numeric_types import DecodePolicy

logger = logging.getLogger(__name__)


def encode_bigdecimal_to_bigquery_bytes(decimal: Decimal | int | str) -> bytes:
    try:
        numeric_bytes = NumericValue(decimal).to_bytes()
    except EncodeError as e:
        logger.debug("Rejected NUMERIC value %r: %s", decimal, e)
        raise
    logger.debug("Encoded NUMERIC value %s into %d bytes", decimal, len(numeric_bytes))
    return numeric_bytes


def decode_bigquery_bytes_to_bigdecimal(
    numeric_bytes: bytes,
    *,
    policy: DecodePolicy = DecodePolicy.RELAXED,
    trim: bool = False,
) -> Decimal:
    try:
        numeric_value = NumericValue.from_bytes(numeric_bytes, policy)
    except DecodeError as e:
        logger.debug("Rejected NUMERIC bytes %s: %s", _summarize_bytes(numeric_bytes), e)
        raise
    logger.debug("Decoded NUMERIC value %s from %d bytes", numeric_value, len(numeric_bytes))
    return numeric_value.to_decimal(trim=trim)


def _summarize_bytes(numeric_bytes: object, limit: int = 16) -> str:
    if not isinstance(numeric_bytes, bytes | bytearray | memoryview):
        return f"of type {type(numeric_bytes).__name__}"
    head = bytes(numeric_bytes[:limit]).hex()
    suffix = "..." if len(numeric_bytes) > limit else ""
    return f"({len(numeric_bytes)} bytes: {head}{suffix})"
