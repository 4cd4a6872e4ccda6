from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLUSCODE_",
        case_sensitive=False,
    )

    # Design default: local async sqlite database.
    db_url: str = "sqlite+aiosqlite:///./data/dev.db"

    # Length used when a model does not pin its own code length.
    default_code_length: int = Field(default=10, ge=2)

    # Rows per commit when backfilling stored codes.
    backfill_batch_size: int = Field(default=500, gt=0)


@lru_cache
def get_settings() -> Settings:
    return Settings()
