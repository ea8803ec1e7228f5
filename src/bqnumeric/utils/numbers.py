from decimal import Decimal

from bqnumeric.utils.numeric_types import Scale, Sign


def digits_to_int(digits: tuple[int, ...]) -> int:
    result = 0
    for d in digits:
        result = result * 10 + d
    return result


def to_unscaled(n: Decimal) -> tuple[int, tuple[int, ...], Scale]:
    "Split a finite Decimal into its sign bit, coefficient digits and scale"

    sign, digits, exponent = n.as_tuple()
    if not isinstance(exponent, int):
        raise ValueError(f"Cannot take the unscaled form of a non-finite value: {n}")
    return sign, digits, -exponent


def unscaled_to_decimal(sign: Sign, magnitude: int, scale: Scale) -> Decimal:
    """Build a Decimal with exactly the given scale from a sign and a
    non-negative magnitude, without going through any decimal context.
    """
    _, digits, _ = Decimal(magnitude).as_tuple()
    return Decimal((sign.decimal_sign, digits, -scale))


def trim_decimal(d: Decimal) -> Decimal:
    """Drop trailing zero fractional digits, keeping the value exact.

    Unlike `Decimal.normalize`, integers never switch to exponent notation:
    `100.000` becomes `100`, not `1E+2`.
    """
    sign, digits, exponent = d.as_tuple()
    if not isinstance(exponent, int):
        return d
    if not any(digits):
        return Decimal(0)
    digits = list(digits)
    while exponent < 0 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    return Decimal((sign, tuple(digits), exponent))


def format_decimal(d: Decimal) -> str:
    "Render a Decimal in plain fixed-point notation, keeping every digit it carries"
    return format(d, "f")
