from abc import ABC, abstractmethod
from typing import Any


class BaseBigIntAdapter(ABC):
    """Contract for all arbitrary-precision integer adapters.

    Values produced by an adapter are integral by construction; the
    construction pipeline never asks whether a pre-built value has a
    fractional part.
    """

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse an ASCII decimal-digit string with an optional leading minus.

        Raises:
            BigIntParseError: if the text is not a base-10 integer literal.
        """

    @abstractmethod
    def from_native(self, number: float) -> Any:
        """Convert an integral native number without loss.

        Raises:
            BigIntParseError: if the number has no integer representation.
        """

    @abstractmethod
    def is_big_integer(self, value: object) -> bool:
        """Whether ``value`` is already an arbitrary-precision value of this adapter."""

    @abstractmethod
    def bit_length(self, value: Any) -> int:
        """Minimal number of bits needed for the magnitude, sign excluded."""

    @abstractmethod
    def twos_complement_bit_length(self, value: Any) -> int:
        """Minimal number of bits needed for the value in two's complement, sign bit included."""

    @abstractmethod
    def is_negative(self, value: Any) -> bool:
        """Whether the value is strictly below zero."""

    @abstractmethod
    def to_decimal_string(self, value: Any) -> str:
        """Render the value in base 10."""
