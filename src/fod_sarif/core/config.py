# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fod_sarif.core.constants import DEFAULT_PAGE_LIMIT
from fod_sarif.core.logging import LOG_FORMATS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FOD_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # FoD connection
    base_url: str = ""
    release_id: str = ""

    # Password grant
    tenant: str = ""
    user: str = ""
    password: str = ""

    # Client credentials grant
    client_id: str = ""
    client_secret: str = ""

    # Output
    output: Path | None = None

    # Detail endpoint throttle
    detail_rate: int = 2
    detail_rate_period: float = 4.0  # seconds
    detail_concurrency: int = 1

    # Paging and transport
    page_limit: int = DEFAULT_PAGE_LIMIT
    request_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("base_url", "release_id", "tenant", "user", "client_id", mode="before")
    @classmethod
    def _strip(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("detail_rate", "detail_concurrency", "page_limit")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            msg = "must be at least 1"
            raise ValueError(msg)
        return v

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, v: str) -> str:
        if v not in LOG_FORMATS:
            msg = f"Unknown log format: {v!r}. Expected one of: {', '.join(LOG_FORMATS)}"
            raise ValueError(msg)
        return v


def get_settings(**overrides: object) -> Settings:
    """Load settings from the environment, letting non-empty *overrides* win."""
    values = {k: v for k, v in overrides.items() if v is not None and v != ""}
    return Settings(**values)
