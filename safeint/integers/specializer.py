from collections.abc import Callable
from typing import Any

from safeint.bigint.base import BaseBigIntAdapter
from safeint.integers.exceptions import UnconstructableIntegerError
from safeint.integers.models import Integer, IntegerKind
from safeint.integers.validators import DEFAULT_ADAPTER
from safeint.logging.logger import Log
from safeint.result.models import Err, Ok, Result

# Adding or removing a width is a change to IntegerKind only.
_VARIANTS: dict[tuple[int, bool], IntegerKind] = {kind.value: kind for kind in IntegerKind}


def specialize(
    width: int,
    signed: bool,
    value: Any,
    adapter: BaseBigIntAdapter = DEFAULT_ADAPTER,
) -> Result[UnconstructableIntegerError, Integer]:
    """Tag a validated value with its integer variant.

    Any (width, signed) pair outside the twelve variants is an error, never
    a silently coerced variant.
    """
    kind = _VARIANTS.get((width, signed)) if isinstance(signed, bool) else None
    if kind is None:
        decimal_value = adapter.to_decimal_string(value)
        Log.warning(f"No integer variant for width {width}, signed {signed}: {decimal_value}")
        return Err(UnconstructableIntegerError(width, signed, decimal_value))
    return Ok(Integer(width=kind.width, signed=kind.signed, value=value))


def construct_integer(
    width: int,
    signed: bool,
    adapter: BaseBigIntAdapter = DEFAULT_ADAPTER,
) -> Callable[[Any], Result[UnconstructableIntegerError, Integer]]:
    """Fix the variant tag so the specializer can be bound as a pipeline stage."""

    def construct(value: Any) -> Result[UnconstructableIntegerError, Integer]:
        return specialize(width, signed, value, adapter)

    return construct
