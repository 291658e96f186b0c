"""
Application layer: evaluation workflow orchestration.

Coordinates the domain evaluation primitives with configuration,
progress reporting and logging.
"""

from application.evaluation import (
    EmptyEvaluationError,
    log_evaluation_summary,
    run_evaluation,
    summarize_matrix,
)
from application.setup import prepare_evaluation

__all__ = [
    # Main workflow
    "prepare_evaluation",
    "run_evaluation",
    "summarize_matrix",
    "log_evaluation_summary",
    # Errors
    "EmptyEvaluationError",
]
