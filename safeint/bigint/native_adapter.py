import re

from safeint.bigint.base import BaseBigIntAdapter
from safeint.bigint.exceptions import BigIntParseError

_DECIMAL_LITERAL = re.compile(r"-?[0-9]+")


class NativeIntAdapter(BaseBigIntAdapter):
    """Arbitrary-precision integers backed by Python's built-in ``int``."""

    def parse(self, text: str) -> int:
        if not _DECIMAL_LITERAL.fullmatch(text):
            raise BigIntParseError(f"Not a base-10 integer: {text!r}")
        try:
            return int(text, 10)
        except ValueError as exc:
            raise BigIntParseError(f"Cannot convert {len(text)}-digit literal: {exc}") from exc

    def from_native(self, number: float) -> int:
        try:
            return int(number)
        except (OverflowError, ValueError) as exc:
            raise BigIntParseError(f"No integer representation for {number!r}") from exc

    def is_big_integer(self, value: object) -> bool:
        # bool subclasses int but is not a number input
        return isinstance(value, int) and not isinstance(value, bool)

    def bit_length(self, value: int) -> int:
        return value.bit_length()

    def twos_complement_bit_length(self, value: int) -> int:
        magnitude = value if value >= 0 else ~value
        return magnitude.bit_length() + 1

    def is_negative(self, value: int) -> bool:
        return value < 0

    def to_decimal_string(self, value: int) -> str:
        return str(value)
