"""Independent validation stages for sized-integer construction.

Every check returns a Result and never raises for input within the
``Constructable`` contract. Checks that need the width are curried so that a
pipeline can fix the width once and bind the returned function.
"""

import re
from collections.abc import Callable
from typing import Any

from safeint.bigint.base import BaseBigIntAdapter
from safeint.bigint.native_adapter import NativeIntAdapter
from safeint.integers.exceptions import (
    FloatingPointNotSupportedError,
    InvalidSizeError,
    NegativeUnsignedError,
    TypeNotSupportedError,
)
from safeint.integers.models import Constructable
from safeint.result.models import Err, Ok, Result

DEFAULT_ADAPTER: BaseBigIntAdapter = NativeIntAdapter()

_DECIMAL_LITERAL = re.compile(r"-?[0-9]+")


def integrality_check(
    value: Constructable,
    adapter: BaseBigIntAdapter = DEFAULT_ADAPTER,
) -> Result[FloatingPointNotSupportedError | TypeNotSupportedError, Constructable]:
    """Reject inputs that could carry a fractional part.

    A string must be ASCII decimal digits with an optional leading minus;
    one with a decimal point is a fraction, anything else is not a
    supported input. Pre-built big integers are passed through unchecked:
    the adapter's value type is integral by construction.
    """
    if isinstance(value, str):
        if "." in value:
            return Err(FloatingPointNotSupportedError())
        if not _DECIMAL_LITERAL.fullmatch(value):
            return Err(TypeNotSupportedError())
        return Ok(value)
    if isinstance(value, float):
        if not value.is_integer():
            return Err(FloatingPointNotSupportedError())
        return Ok(value)
    if adapter.is_big_integer(value):
        return Ok(value)
    return Err(TypeNotSupportedError())


def to_arbitrary_precision(
    value: Constructable,
    adapter: BaseBigIntAdapter = DEFAULT_ADAPTER,
) -> Any:
    """Parse strings and native numbers as base 10; pass big integers through.

    Raises:
        BigIntParseError: if a string is not a decimal literal. Strings that
            passed ``integrality_check`` always parse.
    """
    if isinstance(value, str):
        return adapter.parse(value)
    if isinstance(value, float):
        return adapter.from_native(value)
    return value


def bit_length_check(
    width: int,
    adapter: BaseBigIntAdapter = DEFAULT_ADAPTER,
) -> Callable[[Any], Result[InvalidSizeError, Any]]:
    """Build a check that fails when the magnitude needs more than ``width`` bits."""

    def check(value: Any) -> Result[InvalidSizeError, Any]:
        bit_length = adapter.bit_length(value)
        if bit_length > width:
            return Err(InvalidSizeError(width, bit_length))
        return Ok(value)

    return check


def negative_check(
    value: Any,
    adapter: BaseBigIntAdapter = DEFAULT_ADAPTER,
) -> Result[NegativeUnsignedError, Any]:
    if adapter.is_negative(value):
        return Err(NegativeUnsignedError())
    return Ok(value)


def signed_range_check(
    width: int,
    adapter: BaseBigIntAdapter = DEFAULT_ADAPTER,
) -> Callable[[Any], Result[InvalidSizeError, Any]]:
    """Build a check for the two's-complement range [-2^(width-1), 2^(width-1) - 1]."""

    def check(value: Any) -> Result[InvalidSizeError, Any]:
        required = adapter.twos_complement_bit_length(value)
        if required > width:
            return Err(InvalidSizeError(width, required))
        return Ok(value)

    return check
