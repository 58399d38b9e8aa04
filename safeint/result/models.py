"""Two-variant result type threaded through every construction stage.

A stage never raises on the main path: it returns ``Ok(value)`` to hand a
value to the next stage or ``Err(error)`` to stop the chain.

Usage:
    result = Ok("255").bind(integrality_check).map(to_arbitrary_precision)
    if result.is_err():
        ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

E = TypeVar("E")
V = TypeVar("V")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[V]):
    """Successful outcome holding exactly one value."""

    value: V

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def bind(self, fn: Callable[[V], "Result[Any, U]"]) -> "Result[Any, U]":
        """Feed the value into the next failable stage."""
        return fn(self.value)

    def map(self, fn: Callable[[V], U]) -> "Ok[U]":
        """Transform the value with an infallible function."""
        return Ok(fn(self.value))


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome holding exactly one error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def bind(self, fn: Callable[[Any], "Result[Any, Any]"]) -> "Err[E]":
        return self

    def map(self, fn: Callable[[Any], Any]) -> "Err[E]":
        return self


Result = Err[E] | Ok[V]
