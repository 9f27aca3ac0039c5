"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # IANA zone used for "local" conversions.
    # When unset, the operating system's local zone is used.
    local_timezone: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="WALLCLOCK_",
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
