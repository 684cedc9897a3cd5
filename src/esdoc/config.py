"""Library configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``ESDOC_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ESDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # JSON rendering
    json_ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters in rendered JSON",
    )
    json_sort_keys: bool = Field(
        default=False,
        description="Sort object keys in rendered JSON instead of keeping insertion order",
    )
    json_indent: int | None = Field(
        default=None,
        description="Indentation for rendered JSON; compact output when unset",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
