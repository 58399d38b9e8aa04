from dataclasses import dataclass
from enum import Enum, IntEnum


class Width(IntEnum):
    """Supported bit widths."""

    W8 = 8
    W16 = 16
    W32 = 32
    W64 = 64
    W128 = 128
    W256 = 256


class IntegerKind(Enum):
    """The twelve integer variants, keyed by their (width, signed) pair."""

    UINT8 = (Width.W8, False)
    UINT16 = (Width.W16, False)
    UINT32 = (Width.W32, False)
    UINT64 = (Width.W64, False)
    UINT128 = (Width.W128, False)
    UINT256 = (Width.W256, False)
    INT8 = (Width.W8, True)
    INT16 = (Width.W16, True)
    INT32 = (Width.W32, True)
    INT64 = (Width.W64, True)
    INT128 = (Width.W128, True)
    INT256 = (Width.W256, True)

    @property
    def width(self) -> Width:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    @property
    def label(self) -> str:
        prefix = "int" if self.signed else "uint"
        return f"{prefix}{int(self.width)}"


# A decimal-digit string, a native float, or a pre-built big integer.
Constructable = str | float | int


@dataclass(frozen=True)
class Integer:
    """A value tagged with its exact width and signedness.

    Only the specializer produces these after a successful validation chain.
    """

    width: Width
    signed: bool
    value: int

    @property
    def kind(self) -> IntegerKind:
        return IntegerKind((self.width, self.signed))

    def __int__(self) -> int:
        return int(self.value)
