from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "local"

    # Database
    database_url: str = "sqlite:///clinic.db"
    database_echo: bool = False
    # e.g. "SERIALIZABLE" on PostgreSQL; None keeps the driver default
    database_isolation_level: str | None = None

    # Logging
    log_level: str = "INFO"

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance so the .env is parsed once.
    """
    return Settings()
