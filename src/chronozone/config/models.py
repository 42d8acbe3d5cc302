"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, chronozone.toml only contains
overrides. Without a file every section uses these defaults. Unknown keys
are rejected so that a misspelt option is reported, not ignored.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class TimezonesConfig(BaseModel):
    """[timezones] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    windows_aliases: bool = True
    aliases: dict[str, str] = Field(default_factory=dict)
    nonexistent: Literal["raise", "shift_forward"] = "raise"


class ClockConfig(BaseModel):
    """[clock] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    local_timezone: str | None = None


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True, "extra": "forbid"}

    summary_only: bool = False


class ChronoConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True, "extra": "forbid"}

    timezones: TimezonesConfig = Field(default_factory=TimezonesConfig)
    clock: ClockConfig = Field(default_factory=ClockConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
