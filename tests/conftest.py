import logging
from collections.abc import Generator

import pytest

from safeint.bigint.native_adapter import NativeIntAdapter


@pytest.fixture()
def native_adapter() -> NativeIntAdapter:
    return NativeIntAdapter()


@pytest.fixture()
def restore_safeint_logger() -> Generator[logging.Logger, None, None]:
    """Undo level and handler changes made through Log.configure."""
    logger = logging.getLogger("safeint")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers
