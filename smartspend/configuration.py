"""Mini README: Centralised configuration models and helpers for SmartSpend.

Structure:
    * SmartSpendSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``SMARTSPEND_*`` environment variables
    (or a local ``.env`` file) for the service address, the export directory,
    the projection horizon and the display currency symbol.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .finance.ledger import MAX_PROJECTION_DAYS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SmartSpendSettings(BaseSettings):
    """Runtime configuration for the SmartSpend service."""

    model_config = SettingsConfigDict(
        env_prefix="SMARTSPEND_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory where exported ledger snapshots are written.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP service exposes.",
        ge=1,
        le=65535,
    )
    projection_days: int = Field(
        30,
        description="Default number of days the savings projection looks ahead.",
        ge=0,
        le=MAX_PROJECTION_DAYS,
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts in human readable output.",
    )
    log_level: LogLevel = Field(
        "INFO",
        description="Root logging level applied by the CLI and the HTTP service.",
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand user directories so exports land where operators expect."""

        return Path(value).expanduser().resolve()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> object:
        """Accept level names in any casing."""

        return value.strip().upper() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> SmartSpendSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SmartSpendSettings()
