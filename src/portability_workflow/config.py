"""Configuration for the workflow engine.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

The engine itself needs very little: logging preferences and the step cap
used when a submission is driven in-process.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorkflowSettings(BaseSettings):
    """Settings for the workflow engine.

    Environment variables:
    - LOG_LEVEL            (optional)
    - WORKFLOW_LOG_JSON    (optional)
    - WORKFLOW_MAX_STEPS   (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `WorkflowSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )
    log_json: bool = Field(
        default=True,
        validation_alias="WORKFLOW_LOG_JSON",
        description="Emit structured JSON log lines instead of plain text",
    )
    max_steps: int = Field(
        default=16,
        gt=0,
        validation_alias="WORKFLOW_MAX_STEPS",
        description=(
            "Maximum number of stage executions when running a submission to completion. "
            "Actions may loop back to earlier stages, so this bounds runaway submissions."
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
