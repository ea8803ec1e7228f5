from decimal import Decimal

import pytest


@pytest.fixture
def numeric_vectors() -> list[tuple[Decimal, bytes]]:
    """Values paired with their big-endian two's-complement unscaled bytes,
    as produced by Java's BigInteger for the same NUMERIC values."""
    big_endian_vectors = [
        ("0", [0]),
        ("1.2", [71, 134, 140, 0]),
        ("-1.2", [184, 121, 116, 0]),
        (
            "99999999999999999999999999999.999999999",
            [75, 59, 76, 168, 90, 134, 196, 122, 9, 138, 34, 63, 255, 255, 255, 255],
        ),
        (
            "-99999999999999999999999999999.999999999",
            [180, 196, 179, 87, 165, 121, 59, 133, 246, 117, 221, 192, 0, 0, 0, 1],
        ),
        ("-123456789.42001", [254, 73, 100, 180, 65, 130, 149, 240]),
        ("12.345", [2, 223, 209, 192, 64]),
        ("1", [59, 154, 202, 0]),
        ("2", [119, 53, 148, 0]),
        ("-1", [196, 101, 54, 0]),
        ("128", [29, 205, 101, 0, 0]),
        ("-128", [226, 50, 155, 0, 0]),
        ("12702228", [45, 32, 155, 235, 203, 200, 0]),
    ]
    return [(Decimal(value), bytes(reversed(data))) for value, data in big_endian_vectors]


@pytest.fixture
def max_numeric() -> Decimal:
    return Decimal("99999999999999999999999999999.999999999")
