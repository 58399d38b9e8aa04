from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="SAFEINT_", extra="ignore")

    log_level: str = "INFO"

    bigint_engine: str = "native"

    enforce_signed_range: bool = False
