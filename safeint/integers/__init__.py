from safeint.integers.constructors import (
    Constructor,
    build_constructors,
    int8,
    int16,
    int32,
    int64,
    int128,
    int256,
    integer_to_value,
    safe_int_constructor,
    safe_integer_to_value,
    safe_uint_constructor,
    uint8,
    uint16,
    uint32,
    uint64,
    uint128,
    uint256,
)
from safeint.integers.models import Constructable, Integer, IntegerKind, Width
from safeint.integers.specializer import specialize

__all__ = [
    "Constructable",
    "Constructor",
    "Integer",
    "IntegerKind",
    "Width",
    "build_constructors",
    "int8",
    "int16",
    "int32",
    "int64",
    "int128",
    "int256",
    "integer_to_value",
    "safe_int_constructor",
    "safe_integer_to_value",
    "safe_uint_constructor",
    "specialize",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "uint128",
    "uint256",
]
