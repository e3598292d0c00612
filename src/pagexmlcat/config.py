"""Configuration management for pagexmlcat."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Defaults for CLI options
    default_index: str = "0"
    keep_going: bool = False

    # Output
    encoding: str = "utf-8"

    # Logging
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="PAGEXMLCAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
