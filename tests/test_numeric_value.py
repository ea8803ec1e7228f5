from decimal import Decimal

import pytest

from bqnumeric import DecodePolicy, NumericValue, Sign


def test_given_output_of_to_bytes_when_calling_from_bytes_then_construct_the_same_attributes() -> None:
    # Given
    original = NumericValue(Decimal("-123456789.42001"))

    # When
    numeric_bytes = original.to_bytes()
    new_value = NumericValue.from_bytes(numeric_bytes)

    # Then
    assert new_value == original
    assert new_value.sign == original.sign == Sign.NEGATIVE
    assert new_value.magnitude == original.magnitude == 123456789420010000
    assert new_value.unscaled == -123456789420010000
    assert new_value.value == Decimal("-123456789.42001")


def test_to_bytes_uses_cached_numeric_bytes() -> None:
    numeric_value = NumericValue("1")
    first_bytes = numeric_value.to_bytes()

    # Intentionally modify the cache to ensure the method returns the cached version
    numeric_value._numeric_bytes = b"cached_data"

    assert numeric_value.to_bytes() == b"cached_data"
    assert numeric_value.to_bytes() != first_bytes


def test_relaxed_from_bytes_re_encodes_minimally() -> None:
    numeric_value = NumericValue.from_bytes(b"\x00\xca\x9a\x3b\x00")

    assert numeric_value.to_bytes() == b"\x00\xca\x9a\x3b"


def test_strict_from_bytes_keeps_the_source_bytes() -> None:
    data = bytearray(b"\x00\x36\x65\xc4")

    numeric_value = NumericValue.from_bytes(data, DecodePolicy.STRICT)

    assert numeric_value.to_bytes() == bytes(data)
    assert numeric_value.value == -1


def test_from_unscaled_builds_the_scaled_value() -> None:
    assert NumericValue.from_unscaled(128).value == Decimal("0.000000128")


def test_str_is_the_shortest_fixed_point_form() -> None:
    assert str(NumericValue("1E+3")) == "1000"
    assert str(NumericValue("-0.000000001")) == "-0.000000001"
    assert repr(NumericValue("2.50")) == "NumericValue('2.5')"


def test_equal_values_hash_alike() -> None:
    assert NumericValue("1.5") == NumericValue(Decimal("1.500000000"))
    assert len({NumericValue("1.5"), NumericValue("1.50"), NumericValue(2)}) == 2


def test_bounds_are_the_largest_encodable_values() -> None:
    assert len(NumericValue(NumericValue.MAX_VALUE).to_bytes()) == 16
    assert len(NumericValue(NumericValue.MIN_VALUE).to_bytes()) == 16


def test_sign_and_magnitude_are_read_only() -> None:
    numeric_value = NumericValue("1.5")

    with pytest.raises(AttributeError):
        numeric_value.magnitude = 1  # type: ignore[misc]
    with pytest.raises(AttributeError):
        numeric_value.sign = Sign.NEGATIVE  # type: ignore[misc]

    assert hash(numeric_value) == hash(NumericValue("1.5"))
