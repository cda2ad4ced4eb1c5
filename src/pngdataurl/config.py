"""
Configuration
=============

File names and limits are fixed constants: the encoder always reads
``user.png`` and writes ``user_base64.txt``. Only ambient behaviour (log
verbosity, the directory those names are resolved in) comes from the
environment or a ``.env`` file, through Pydantic Settings.

Usage:
    from pngdataurl.config import get_config

    cfg = get_config()
    print(cfg.source_path)
    print(cfg.log_level)

Environment:
    PNGDATAURL_LOG_LEVEL   DEBUG / INFO / WARNING / ERROR / CRITICAL
    PNGDATAURL_WORK_DIR    directory holding user.png (default: cwd)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ---------------------------------------------------------------------------
# Fixed constants
# ---------------------------------------------------------------------------

SOURCE_FILENAME: Final[str] = "user.png"
OUTPUT_FILENAME: Final[str] = "user_base64.txt"
PREVIEW_LENGTH: Final[int] = 100

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Configuration class
# ---------------------------------------------------------------------------

class EncoderConfig(BaseSettings):
    """Ambient settings for a single encoder run."""

    model_config = SettingsConfigDict(
        env_prefix="PNGDATAURL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for diagnostics on stderr",
    )
    work_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory in which user.png and user_base64.txt are resolved",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        """Normalise to upper case and reject unknown level names."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got: {v!r}"
            )
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric level for ``logging.basicConfig``."""
        return logging.getLevelName(self.log_level)

    @property
    def source_path(self) -> Path:
        return self.work_dir / SOURCE_FILENAME

    @property
    def output_path(self) -> Path:
        return self.work_dir / OUTPUT_FILENAME


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------

_config_instance: EncoderConfig | None = None


def get_config() -> EncoderConfig:
    """
    Get the global configuration singleton.

    Loaded once from environment variables and .env; later calls return
    the cached instance.
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = EncoderConfig()
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
