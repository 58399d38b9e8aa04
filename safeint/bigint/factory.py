from safeint.bigint.base import BaseBigIntAdapter
from safeint.bigint.native_adapter import NativeIntAdapter
from safeint.config.settings import Settings
from safeint.logging.logger import Log


class BigIntAdapterFactory:
    """Creates the correct big-integer adapter based on settings."""

    ADAPTERS: dict[str, type[BaseBigIntAdapter]] = {
        "native": NativeIntAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseBigIntAdapter:
        engine = settings.bigint_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown big-integer engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        Log.debug(f"Using big-integer engine '{engine}'")
        return adapter_cls()
