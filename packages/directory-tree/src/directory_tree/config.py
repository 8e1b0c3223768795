from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``DIRECTORY_TREE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DIRECTORY_TREE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Logging
    log_level: str = "INFO"

    # Assembly
    strict_root: bool = True
    sort_entries: bool = True


settings = Settings()
