"""Pydantic schema for perception_utils configuration validation.

Mirrors the YAML structure in config/default.yaml. Used when
``validate=True`` is passed to ``PerceptionConfig.load()``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SystemConfig(BaseModel):
    name: str = "perception_utils"
    version: str = "0.1.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    validate_config: bool = False
    log_file: str | None = None
    log_json: bool = False


class OutputConfig(BaseModel):
    format: Literal["text", "json"] = "text"
    precision: int = Field(default=3, ge=0, le=17)


class PerceptionRootConfig(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = {"extra": "allow"}


class PerceptionConfigSchema(BaseModel):
    """Top-level wrapper matching YAML root key ``perception_utils:``."""

    perception_utils: PerceptionRootConfig

    model_config = {"extra": "allow"}


def validate_config(cfg_dict: dict) -> PerceptionConfigSchema:
    """Validate a raw config dict (e.g. from OmegaConf) against the schema.

    Raises ``pydantic.ValidationError`` on invalid config.
    """
    return PerceptionConfigSchema.model_validate(cfg_dict)


def default_config_dict() -> dict:
    """Schema defaults as a plain dict, used when no YAML file is present."""
    return PerceptionConfigSchema(perception_utils=PerceptionRootConfig()).model_dump()
