from bqnumeric.utils.numeric_types import Magnitude, Sign, UnscaledValue


def to_signed_int(sign: Sign, magnitude: Magnitude) -> UnscaledValue:
    if magnitude < 0:
        raise ValueError(f"Magnitude must be non-negative, got {magnitude}.")
    if sign is Sign.ZERO and magnitude != 0:
        raise ValueError(f"A nonzero magnitude {magnitude} cannot carry the zero sign.")
    return -magnitude if sign is Sign.NEGATIVE else magnitude


def from_signed_int(value: UnscaledValue) -> tuple[Sign, Magnitude]:
    return Sign.from_int(value), abs(value)
