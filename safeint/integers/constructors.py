"""Public constructors for the twelve sized-integer variants.

Usage:
    uint8("255")   # Ok(Integer(width=Width.W8, signed=False, value=255))
    uint8("256")   # Err(InvalidSizeError(8, 9))
    uint8(-1)      # Err(NegativeUnsignedError())
"""

from collections.abc import Callable
from functools import partial

from safeint.bigint.base import BaseBigIntAdapter
from safeint.bigint.factory import BigIntAdapterFactory
from safeint.config.settings import Settings
from safeint.integers.exceptions import ErrorKind
from safeint.integers.models import Constructable, Integer, IntegerKind, Width
from safeint.integers.pipeline import ConstructionPipeline
from safeint.integers.specializer import construct_integer
from safeint.integers.validators import (
    DEFAULT_ADAPTER,
    bit_length_check,
    integrality_check,
    negative_check,
    signed_range_check,
    to_arbitrary_precision,
)
from safeint.result.combinators import Stage, bind, fmap
from safeint.result.models import Result

Constructor = Callable[[Constructable], Result[ErrorKind, Integer]]


def safe_uint_constructor(
    width: int,
    adapter: BaseBigIntAdapter | None = None,
) -> Constructor:
    """Build the unsigned constructor for ``width``.

    Stages: integrality -> parse -> bit length -> non-negativity -> specialize.
    """
    if adapter is None:
        adapter = DEFAULT_ADAPTER
    stages: list[Stage] = [
        bind(partial(integrality_check, adapter=adapter)),
        fmap(partial(to_arbitrary_precision, adapter=adapter)),
        bind(bit_length_check(width, adapter)),
        bind(partial(negative_check, adapter=adapter)),
        bind(construct_integer(width, False, adapter)),
    ]
    return ConstructionPipeline(f"uint{width}", stages).run


def safe_int_constructor(
    width: int,
    adapter: BaseBigIntAdapter | None = None,
    enforce_signed_range: bool = False,
) -> Constructor:
    """Build the signed constructor for ``width``.

    Stages: integrality -> parse -> bit length -> specialize. By default a
    signed value is limited by the bit length of its magnitude only; with
    ``enforce_signed_range`` the two's-complement range is checked as well.
    """
    if adapter is None:
        adapter = DEFAULT_ADAPTER
    stages: list[Stage] = [
        bind(partial(integrality_check, adapter=adapter)),
        fmap(partial(to_arbitrary_precision, adapter=adapter)),
        bind(bit_length_check(width, adapter)),
    ]
    if enforce_signed_range:
        stages.append(bind(signed_range_check(width, adapter)))
    stages.append(bind(construct_integer(width, True, adapter)))
    return ConstructionPipeline(f"int{width}", stages).run


uint8: Constructor = safe_uint_constructor(Width.W8)
uint16: Constructor = safe_uint_constructor(Width.W16)
uint32: Constructor = safe_uint_constructor(Width.W32)
uint64: Constructor = safe_uint_constructor(Width.W64)
uint128: Constructor = safe_uint_constructor(Width.W128)
uint256: Constructor = safe_uint_constructor(Width.W256)

int8: Constructor = safe_int_constructor(Width.W8)
int16: Constructor = safe_int_constructor(Width.W16)
int32: Constructor = safe_int_constructor(Width.W32)
int64: Constructor = safe_int_constructor(Width.W64)
int128: Constructor = safe_int_constructor(Width.W128)
int256: Constructor = safe_int_constructor(Width.W256)


def integer_to_value(integer: Integer) -> int:
    return integer.value


safe_integer_to_value = fmap(integer_to_value)


def build_constructors(settings: Settings) -> dict[IntegerKind, Constructor]:
    """Build one constructor per variant with the configured adapter and policy."""
    adapter = BigIntAdapterFactory.create(settings)
    constructors: dict[IntegerKind, Constructor] = {}
    for kind in IntegerKind:
        if kind.signed:
            constructors[kind] = safe_int_constructor(
                kind.width,
                adapter,
                enforce_signed_range=settings.enforce_signed_range,
            )
        else:
            constructors[kind] = safe_uint_constructor(kind.width, adapter)
    return constructors
