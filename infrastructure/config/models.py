"""Configuration models (Pydantic classes)."""

import logging
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from domain.evaluation.progress import PROGRESS_STEPS

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ProgressTarget(str, Enum):
    """Where evaluation progress is reported."""

    STDOUT = "stdout"
    STDERR = "stderr"
    LOG = "log"
    NONE = "none"


class NanPolicy(str, Enum):
    """How the workflow treats the undefined error rate of an empty matrix."""

    ALLOW = "allow"
    RAISE = "raise"


class ProgressConfig(BaseModel):
    """Progress reporting during `Classifier.test`."""

    target: ProgressTarget = ProgressTarget.STDOUT
    steps: int = Field(default=PROGRESS_STEPS, ge=1, le=100, description="Updates per full pass.")


class LoggingConfig(BaseModel):
    """Console and optional rotating file logging."""

    console_level: LogLevelName = "INFO"
    file_level: LogLevelName = "DEBUG"
    log_file: Path | None = None

    @field_validator("console_level", "file_level", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def console_level_no(self) -> int:
        return logging.getLevelName(self.console_level)

    @property
    def file_level_no(self) -> int:
        return logging.getLevelName(self.file_level)


class EvaluationConfig(BaseModel):
    """
    Evaluation configuration.
    - Loaded from evaluation.yaml (every key optional)
    - Consumed by the evaluation workflow and progress sink factory
    """

    progress: ProgressConfig = Field(default_factory=ProgressConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    nan_policy: NanPolicy = Field(
        default=NanPolicy.ALLOW,
        description="'allow' reports an empty evaluation as error_rate=nan; 'raise' fails instead.",
    )
    label_order: list[str] | None = Field(
        default=None,
        description="Optional label ordering for the summary dict. The text report is always sorted naturally.",
    )
