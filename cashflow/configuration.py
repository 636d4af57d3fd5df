"""Mini README: Centralised configuration for the cash-flow report tools.

Structure:
    * CashflowSettings - Pydantic settings model describing runtime defaults.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values are read from ``CASHFLOW_*`` environment variables or a local
    ``.env`` file. Command-line options override them; the CLI passes the
    resolved values into each pipeline stage explicitly.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class CashflowSettings(BaseSettings):
    """Runtime configuration for ledger processing and reporting."""

    default_ledger_file: Path = Field(
        Path("sample-cashflow.md"),
        description="Ledger file processed when no --file option is given.",
    )
    top_expense_tags: int = Field(
        10,
        description="Number of high-impact expense tags listed in reports.",
        ge=1,
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level for diagnostic output on stderr.",
    )

    class Config:
        env_prefix = "CASHFLOW_"
        env_file = ".env"
        case_sensitive = False

    @validator("default_ledger_file", pre=True)
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories in the configured ledger path."""

        return Path(value).expanduser()

    @validator("log_level")
    def _validate_level(cls, value: str) -> str:
        """Accept standard logging level names in any casing."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unsupported log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> CashflowSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return CashflowSettings()
