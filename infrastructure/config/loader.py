"""Configuration loading from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import EvaluationConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_evaluation_config(path: Path) -> EvaluationConfig:
    """
    Load evaluation.yaml into an EvaluationConfig.

    Unknown top-level keys are rejected so typos do not silently fall back to defaults.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is not a mapping or has unknown keys
        pydantic.ValidationError: If values have invalid types/ranges
    """
    data = _load_yaml(path)

    unknown = sorted(set(data) - set(EvaluationConfig.model_fields))
    if unknown:
        raise ValueError(f"Unknown keys in {path}: {unknown}. Allowed: {sorted(EvaluationConfig.model_fields)}")

    return EvaluationConfig(**data)
