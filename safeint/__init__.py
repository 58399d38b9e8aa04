from safeint.bootstrap import bootstrap
from safeint.integers import (
    Constructable,
    Constructor,
    Integer,
    IntegerKind,
    Width,
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
    specialize,
    uint8,
    uint16,
    uint32,
    uint64,
    uint128,
    uint256,
)
from safeint.integers.exceptions import (
    DivisionByZeroError,
    ErrorKind,
    FloatingPointNotSupportedError,
    InconsistentSizeError,
    IntegerOverflowError,
    IntegerUnderflowError,
    InvalidSizeError,
    NegativeUnsignedError,
    SafeIntegerError,
    TypeNotSupportedError,
    UnconstructableIntegerError,
)
from safeint.result import Err, Ok, Result, bind, extract, fmap, loudly_extract

__all__ = [
    "Constructable",
    "Constructor",
    "DivisionByZeroError",
    "Err",
    "ErrorKind",
    "FloatingPointNotSupportedError",
    "InconsistentSizeError",
    "Integer",
    "IntegerKind",
    "IntegerOverflowError",
    "IntegerUnderflowError",
    "InvalidSizeError",
    "NegativeUnsignedError",
    "Ok",
    "Result",
    "SafeIntegerError",
    "TypeNotSupportedError",
    "UnconstructableIntegerError",
    "Width",
    "bind",
    "bootstrap",
    "build_constructors",
    "extract",
    "fmap",
    "int8",
    "int16",
    "int32",
    "int64",
    "int128",
    "int256",
    "integer_to_value",
    "loudly_extract",
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
