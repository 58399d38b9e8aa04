"""Tests for the individual construction checks."""

import pytest

from safeint.bigint.exceptions import BigIntParseError
from safeint.integers.exceptions import (
    FloatingPointNotSupportedError,
    InvalidSizeError,
    NegativeUnsignedError,
    TypeNotSupportedError,
)
from safeint.integers.validators import (
    bit_length_check,
    integrality_check,
    negative_check,
    signed_range_check,
    to_arbitrary_precision,
)
from safeint.result.models import Err, Ok


class TestIntegralityCheck:
    def test_allows_non_decimal_string(self) -> None:
        assert integrality_check("64") == Ok("64")

    def test_allows_integral_float(self) -> None:
        assert integrality_check(288.0) == Ok(288.0)

    def test_allows_big_integer(self) -> None:
        assert integrality_check(288) == Ok(288)

    def test_rejects_decimal_string(self) -> None:
        assert integrality_check("6.4") == Err(FloatingPointNotSupportedError())

    def test_rejects_trailing_point_string(self) -> None:
        assert integrality_check("6.") == Err(FloatingPointNotSupportedError())

    def test_rejects_fractional_float(self) -> None:
        assert integrality_check(28.8) == Err(FloatingPointNotSupportedError())

    def test_rejects_infinity_and_nan(self) -> None:
        assert integrality_check(float("inf")) == Err(FloatingPointNotSupportedError())
        assert integrality_check(float("nan")) == Err(FloatingPointNotSupportedError())

    def test_rejects_bool(self) -> None:
        assert integrality_check(True) == Err(TypeNotSupportedError())  # type: ignore[arg-type]

    def test_rejects_non_decimal_strings(self) -> None:
        for text in ("12a", "1_0", " 7\n", "\u0663", "+5", "1e3", ""):
            assert integrality_check(text) == Err(TypeNotSupportedError()), text

    def test_decimal_point_wins_over_malformed_text(self) -> None:
        assert integrality_check("1_0.5") == Err(FloatingPointNotSupportedError())

    def test_rejects_unsupported_types(self) -> None:
        assert integrality_check(None) == Err(TypeNotSupportedError())  # type: ignore[arg-type]
        assert integrality_check([1]) == Err(TypeNotSupportedError())  # type: ignore[arg-type]


class TestToArbitraryPrecision:
    def test_parses_string(self) -> None:
        assert to_arbitrary_precision("72") == 72

    def test_converts_float(self) -> None:
        value = to_arbitrary_precision(800.0)
        assert value == 800
        assert isinstance(value, int)

    def test_passes_big_integer_through(self) -> None:
        big = 2**200
        assert to_arbitrary_precision(big) is big

    def test_malformed_string_raises(self) -> None:
        with pytest.raises(BigIntParseError):
            to_arbitrary_precision("seventy")


class TestBitLengthCheck:
    def test_passes_values_that_fill_the_width(self) -> None:
        for width in range(1, 257):
            value = 2**width - 1
            assert bit_length_check(width)(value) == Ok(value)

    def test_fails_one_past_the_width(self) -> None:
        for width in range(1, 257):
            value = 2**width
            assert bit_length_check(width)(value) == Err(InvalidSizeError(width, width + 1))

    def test_zero_fits_any_width(self) -> None:
        assert bit_length_check(8)(0) == Ok(0)

    def test_measures_magnitude_of_negative_values(self) -> None:
        assert bit_length_check(8)(-255) == Ok(-255)
        assert bit_length_check(8)(-256) == Err(InvalidSizeError(8, 9))


class TestNegativeCheck:
    def test_passes_positive(self) -> None:
        assert negative_check(1) == Ok(1)

    def test_passes_zero(self) -> None:
        assert negative_check(0) == Ok(0)

    def test_fails_negative(self) -> None:
        assert negative_check(-1) == Err(NegativeUnsignedError())


class TestSignedRangeCheck:
    def test_passes_bounds(self) -> None:
        assert signed_range_check(8)(127) == Ok(127)
        assert signed_range_check(8)(-128) == Ok(-128)

    def test_fails_above_max(self) -> None:
        assert signed_range_check(8)(128) == Err(InvalidSizeError(8, 9))

    def test_fails_below_min(self) -> None:
        assert signed_range_check(8)(-129) == Err(InvalidSizeError(8, 9))

    def test_bounds_for_wide_values(self) -> None:
        assert signed_range_check(256)(2**255 - 1) == Ok(2**255 - 1)
        assert signed_range_check(256)(-(2**255)) == Ok(-(2**255))
        assert signed_range_check(256)(2**255) == Err(InvalidSizeError(256, 257))
