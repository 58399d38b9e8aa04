"""Consume a final ``Result`` outside the pipeline."""

import copy
from collections.abc import Callable
from typing import Any, TypeVar

from safeint.logging.logger import Log
from safeint.result.models import Err, Result

E = TypeVar("E")
V = TypeVar("V")
T = TypeVar("T")


def loudly_extract(continuation: Callable[[V], T]) -> Callable[[Result[Any, V]], T]:
    """Return ``continuation(value)`` for ``Ok``; raise the error for ``Err``.

    This is the only place where a construction error leaves the Result
    discipline and becomes an exception.
    """

    def run(result: Result[Any, V]) -> T:
        if isinstance(result, Err):
            Log.error(f"Extracting failed result: {result.error}")
            # the stored error stays free of tracebacks from earlier raises
            raise copy.copy(result.error) from None
        return continuation(result.value)

    return run


def extract(
    on_error: Callable[[E], T],
    on_success: Callable[[V], T],
) -> Callable[[Result[E, V]], T]:
    """Fold a result into a single value without raising."""

    def run(result: Result[E, V]) -> T:
        if isinstance(result, Err):
            return on_error(result.error)
        return on_success(result.value)

    return run
