"""
Configuration management: models, loading, and validation.

Handles:
- EvaluationConfig: progress, logging and empty-matrix policy
- Loading from YAML

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_evaluation_config
from infrastructure.config.models import (
    EvaluationConfig,
    LoggingConfig,
    NanPolicy,
    ProgressConfig,
    ProgressTarget,
)

__all__ = [
    # Main config (most commonly used)
    "EvaluationConfig",
    "load_evaluation_config",
    # Sections
    "ProgressConfig",
    "LoggingConfig",
    # Enums
    "ProgressTarget",
    "NanPolicy",
]
