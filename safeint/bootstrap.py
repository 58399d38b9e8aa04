from safeint.config.settings import Settings
from safeint.integers.constructors import Constructor, build_constructors
from safeint.integers.models import IntegerKind
from safeint.logging.logger import Log


def bootstrap(settings: Settings | None = None) -> dict[IntegerKind, Constructor]:
    """Entry point: load settings -> configure logging -> build constructors."""
    if settings is None:
        settings = Settings()
    Log.configure(settings.log_level)
    constructors = build_constructors(settings)
    Log.info(
        f"Built {len(constructors)} integer constructors "
        f"(engine={settings.bigint_engine}, enforce_signed_range={settings.enforce_signed_range})"
    )
    return constructors
