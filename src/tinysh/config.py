"""Configuration management for tinysh."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogProfile = Literal["default", "rich"]


class Settings(BaseSettings):
    """Shell settings, read from ``TINYSH_*`` environment variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="TINYSH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = Field(default="$ ", description="Prompt written before each line is read")
    start_dir: Path = Field(default=Path("/"), description="Initial working directory")
    search_path: Optional[str] = Field(None, description="Overrides PATH for command lookup")
    home: Optional[Path] = Field(None, description="Overrides home directory detection")

    log_level: str = Field(default="WARNING", description="Log level")
    log_profile: LogProfile = Field(default="default", description="Log output profile")


def load_settings(**overrides: object) -> Settings:
    """Load settings, applying non-``None`` overrides on top."""

    settings = Settings()
    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        settings = settings.model_copy(update=updates)
    return settings
