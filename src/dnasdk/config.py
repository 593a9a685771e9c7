"""
Configuration management using pydantic-settings.
"""

from __future__ import annotations

import sys

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DNASDK_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    # Total fee per transaction kind ("Transfer", "Register", "Issue").
    # -1 asks for a size-derived fee, which is not supported.
    transaction_fee: dict[str, float] = Field(default_factory=dict)

    log_level: str = "INFO"

    def fee_for(self, kind: str) -> float | None:
        """Configured total fee for a transaction kind, or None if not configured."""
        return self.transaction_fee.get(kind)


def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str = "INFO") -> None:
    """Configure loguru logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
