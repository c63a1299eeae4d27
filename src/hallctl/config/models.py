"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, hallctl.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)
    color: bool = True


class HallConfig(BaseModel):
    """Root configuration composing all hallctl.toml sections."""

    model_config = {"frozen": True}

    output: OutputConfig = Field(default_factory=OutputConfig)
