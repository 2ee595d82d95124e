"""Environment-driven settings for the command-line interface."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import DEFAULT_MAX_ERRORS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SITEGEN_", case_sensitive=False)

    source_dir: Path = Path("./src")
    dest_dir: Path = Path("./generated")
    max_errors: int = Field(default=DEFAULT_MAX_ERRORS, ge=1)
    file_mode: str = "0644"
    watch_interval: float = Field(default=0.5, gt=0)
