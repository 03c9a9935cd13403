from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///milktech.db"
    # Prefix for every document key, e.g. "milktech:animals"
    key_namespace: str = "milktech"
    log_level: str = "INFO"
    environment: str = "dev"
    # Load demo dairies, prices, tanks and recipes into an empty store
    seed_sample_data: bool = False

    model_config = SettingsConfigDict(
        env_prefix="MILKTECH_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("database_url")
    @classmethod
    def ensure_async_driver(cls, value: str) -> str:
        if value.startswith("sqlite:///"):
            return value.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
        return value

    @field_validator("key_namespace")
    @classmethod
    def strip_separator(cls, value: str) -> str:
        return value.strip().rstrip(":")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
