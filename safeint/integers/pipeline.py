from typing import Any

from safeint.integers.exceptions import ErrorKind
from safeint.integers.models import Constructable, Integer
from safeint.logging.logger import Log
from safeint.result.combinators import Stage
from safeint.result.models import Err, Ok, Result


class ConstructionPipeline:
    """Runs lifted construction stages in order over ``Ok(input)``.

    Stages are built with ``bind``/``fmap``, so once a stage returns ``Err``
    every later stage hands it through untouched.
    """

    def __init__(self, label: str, stages: list[Stage]) -> None:
        self._label = label
        self._stages = tuple(stages)

    @property
    def label(self) -> str:
        return self._label

    @property
    def stages(self) -> tuple[Stage, ...]:
        return self._stages

    def run(self, value: Constructable) -> Result[ErrorKind, Integer]:
        result: Result[Any, Any] = Ok(value)
        for stage in self._stages:
            result = stage(result)
        if isinstance(result, Err):
            Log.debug(f"Rejected {value!r} as {self._label}: {result.error}")
        return result
