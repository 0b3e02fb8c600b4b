"""Runtime settings for stepflow.

Values are read from the environment and from a local ``.env`` file (if
present). In tests, override the env file via
``StepflowSettings(_env_file=path_to_env)``.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StepflowSettings(BaseSettings):
    """Settings for running workflows.

    Environment variables:
    - STEPFLOW_LOG_LEVEL  (optional)
    - STEPFLOW_MAX_STEPS  (optional; unset means unbounded runs)
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="STEPFLOW_LOG_LEVEL",
        description="Root logging level",
    )

    max_steps: int | None = Field(
        default=None,
        ge=1,
        validation_alias="STEPFLOW_MAX_STEPS",
        description="Abort runs that produce more events than this (opt-in)",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
