from bqnumeric.codec import (
    DecodeError,
    EncodeError,
    InvalidBytesError,
    InvalidDecimalError,
    NumericEncoderError,
    NumericSchema,
    NumericValue,
    OutOfRangeError,
    PrecisionLossError,
    decode_bigquery_bytes_to_bigdecimal,
    encode_bigdecimal_to_bigquery_bytes,
)
from bqnumeric.utils.numeric_types import DecodePolicy, Sign

__all__ = [
    "DecodeError",
    "DecodePolicy",
    "EncodeError",
    "InvalidBytesError",
    "InvalidDecimalError",
    "NumericEncoderError",
    "NumericSchema",
    "NumericValue",
    "OutOfRangeError",
    "PrecisionLossError",
    "Sign",
    "decode_bigquery_bytes_to_bigdecimal",
    "encode_bigdecimal_to_bigquery_bytes",
]
