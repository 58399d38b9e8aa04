"""Lift plain stage functions into ``Result -> Result`` pipeline stages."""

from collections.abc import Callable
from typing import Any, TypeVar

from safeint.result.models import Result

V = TypeVar("V")
U = TypeVar("U")

Stage = Callable[[Result[Any, Any]], Result[Any, Any]]


def bind(fn: Callable[[V], Result[Any, U]]) -> Stage:
    """Sequence a failable function; an incoming ``Err`` is returned unchanged."""

    def stage(result: Result[Any, V]) -> Result[Any, U]:
        return result.bind(fn)

    return stage


def fmap(fn: Callable[[V], U]) -> Stage:
    """Transform the success payload; an incoming ``Err`` is returned unchanged."""

    def stage(result: Result[Any, V]) -> Result[Any, U]:
        return result.map(fn)

    return stage
