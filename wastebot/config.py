"""Runtime configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=5000)
    debug: bool = Field(default=False)
    # .csv or .xlsx sheet overriding the built-in keyword tables
    tables_path: Optional[str] = Field(default=None)
    log_level: str = Field(default="INFO")
    cors_origins: str = Field(default="*")

    model_config = SettingsConfigDict(
        env_prefix="WASTEBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
