"""
Rescaling between arbitrary-precision decimals and the fixed scale of the
NUMERIC type.

Encoding turns a Decimal into a sign and a non-negative magnitude at scale 9,
refusing to drop nonzero digits or to exceed 38 digits of precision. The work
is done on the coefficient digits, so values such as `1E+100000` or
`1E-100000` are rejected without building huge intermediate integers.

Decoding is the inverse: a magnitude at scale 9 becomes a Decimal carrying
exactly 9 fractional digits, optionally trimmed to its shortest exact form.
"""

from decimal import Decimal

from bqnumeric.codec.exceptions import OutOfRangeError, PrecisionLossError
from bqnumeric.utils.numbers import digits_to_int, to_unscaled, trim_decimal, unscaled_to_decimal
from bqnumeric.utils.numeric_types import Magnitude, Sign

NUMERIC_SCALE = 9
NUMERIC_PRECISION = 38
MAX_MAGNITUDE: Magnitude = 10**NUMERIC_PRECISION - 1


def normalize(value: Decimal) -> tuple[Sign, Magnitude]:
    sign_bit, digits, scale = to_unscaled(value)
    if not any(digits):
        return Sign.ZERO, 0

    if scale > NUMERIC_SCALE:
        extra = scale - NUMERIC_SCALE
        if _trailing_zeros(digits) < extra:
            raise PrecisionLossError(value, scale, NUMERIC_SCALE)
        digits = digits[:-extra]
        padding = 0
    else:
        padding = NUMERIC_SCALE - scale

    # Decimal coefficients carry no leading zeros, so the digit count is exact.
    if len(digits) + padding > NUMERIC_PRECISION:
        raise OutOfRangeError(value, NUMERIC_PRECISION)

    magnitude = digits_to_int(digits) * 10**padding
    return Sign.from_decimal_sign(sign_bit, magnitude), magnitude


def denormalize(sign: Sign, magnitude: Magnitude, trim: bool = False) -> Decimal:
    # checked on the int so oversized input never reaches Decimal conversion
    if magnitude > MAX_MAGNITUDE:
        raise OutOfRangeError(f"{magnitude.bit_length()}-bit unscaled value", NUMERIC_PRECISION)
    value = unscaled_to_decimal(sign, magnitude, NUMERIC_SCALE)
    return trim_decimal(value) if trim else value


def _trailing_zeros(digits: tuple[int, ...]) -> int:
    count = 0
    for d in reversed(digits):
        if d != 0:
            break
        count += 1
    return count
