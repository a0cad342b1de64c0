"""Configuration loading.

Settings come from ``SALES_``-prefixed environment variables or a ``.env``
file in the working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="SALES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding products.json and sales.json",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Root logging level",
    )


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
