"""
Environment driven settings for printperf.

Honours these env vars:
    PRINTPERF_COLOR   auto | always | never   (default: auto)
    NO_COLOR          any non-empty value disables decoration in auto mode
"""

from __future__ import annotations

import os
from typing import Literal, Optional

import typer
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

ColorMode = Literal["auto", "always", "never"]


class PerfConfig(BaseModel):
    model_config = ConfigDict(validate_default=True)

    color: ColorMode = Field(default_factory=lambda: os.getenv("PRINTPERF_COLOR", "auto"))
    no_color: bool = Field(default_factory=lambda: bool(os.getenv("NO_COLOR")))

    @field_validator("color", mode="before")
    @classmethod
    def _normalise_color(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower() or "auto"
        return value


# ---------- Singleton access ----------

_config_singleton: Optional[PerfConfig] = None

def get_config(force_refresh: bool = False) -> PerfConfig:
    """
    Return a cached PerfConfig read from the environment.
    A bad PRINTPERF_COLOR value is reported once and treated as "auto".
    """
    global _config_singleton
    if force_refresh or _config_singleton is None:
        try:
            _config_singleton = PerfConfig()
        except ValidationError:
            typer.echo(
                f"[printperf] ignoring PRINTPERF_COLOR={os.getenv('PRINTPERF_COLOR')!r} "
                "(expected auto, always or never)",
                err=True,
            )
            _config_singleton = PerfConfig(color="auto")
    return _config_singleton


__all__ = ["ColorMode", "PerfConfig", "get_config"]
