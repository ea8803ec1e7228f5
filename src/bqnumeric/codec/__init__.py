from bqnumeric.codec.encoder import (
    decode_bigquery_bytes_to_bigdecimal,
    encode_bigdecimal_to_bigquery_bytes,
)
from bqnumeric.codec.exceptions import (
    DecodeError,
    EncodeError,
    InvalidBytesError,
    InvalidDecimalError,
    NumericEncoderError,
    OutOfRangeError,
    PrecisionLossError,
)
from bqnumeric.codec.numeric_schema import NumericSchema
from bqnumeric.codec.numeric_value import NumericValue

__all__ = [
    "DecodeError",
    "EncodeError",
    "InvalidBytesError",
    "InvalidDecimalError",
    "NumericEncoderError",
    "NumericSchema",
    "NumericValue",
    "OutOfRangeError",
    "PrecisionLossError",
    "decode_bigquery_bytes_to_bigdecimal",
    "encode_bigdecimal_to_bigquery_bytes",
]
