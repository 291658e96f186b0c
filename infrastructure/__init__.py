"""
Infrastructure layer: configuration and I/O boundaries.

Contains:
- Configuration loading (YAML)
- Progress sink construction
- Observability (logging)
"""

from infrastructure.config import EvaluationConfig, ProgressTarget, load_evaluation_config
from infrastructure.observability import configure_logging
from infrastructure.progress import make_progress_sink

__all__ = [
    "EvaluationConfig",
    "ProgressTarget",
    "load_evaluation_config",
    "make_progress_sink",
    "configure_logging",
]
