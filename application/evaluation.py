"""Evaluation workflow and summary logging."""

import logging
import math
from collections.abc import Hashable, Sequence
from typing import Any, TypeVar

from application.constants import (
    CORRECT_KEY,
    ERROR_RATE_KEY,
    INCORRECT_KEY,
    LABELS_KEY,
    TOTAL_KEY,
    UNDEFINED_RATE,
)
from domain.evaluation.classifier import Classifier
from domain.evaluation.confusion import ConfusionMatrix
from domain.evaluation.progress import ProgressSink
from infrastructure.config.models import EvaluationConfig, NanPolicy
from infrastructure.observability import clear_evaluation_context, set_log_context
from infrastructure.progress import make_progress_sink

logger = logging.getLogger(__name__)

I = TypeVar("I")  # noqa: E741
L = TypeVar("L", bound=Hashable)


class EmptyEvaluationError(ValueError):
    """Raised when an empty matrix is summarized under nan_policy='raise'."""


def _ordered_labels(matrix: ConfusionMatrix, label_order: Sequence[str] | None) -> list:
    """Configured labels first (as strings), then any others in natural order."""
    natural = matrix.sorted_labels()
    if not label_order:
        return natural

    by_name = {str(label): label for label in natural}
    ordered = [by_name[name] for name in label_order if name in by_name]
    seen = set(ordered)
    return ordered + [label for label in natural if label not in seen]


def summarize_matrix(matrix: ConfusionMatrix, cfg: EvaluationConfig | None = None) -> dict[str, Any]:
    """
    Flatten a ConfusionMatrix into a plain dict.

    Args:
        matrix: Populated (or empty) confusion matrix
        cfg: Evaluation configuration (label_order, nan_policy)

    Returns:
        Dict with labels, per-label correct/incorrect counts, total and error_rate

    Raises:
        EmptyEvaluationError: If the matrix is empty and nan_policy is 'raise'
    """
    cfg = cfg or EvaluationConfig()

    if matrix.total == 0 and cfg.nan_policy is NanPolicy.RAISE:
        raise EmptyEvaluationError("Nothing was recorded; error rate is undefined (nan_policy=raise).")

    labels = _ordered_labels(matrix, cfg.label_order)
    return {
        LABELS_KEY: labels,
        CORRECT_KEY: {label: matrix.right_count(label) for label in labels},
        INCORRECT_KEY: {label: matrix.wrong_count(label) for label in labels},
        TOTAL_KEY: matrix.total,
        ERROR_RATE_KEY: matrix.error_rate(),
    }


def run_evaluation(
    classifier: Classifier[I, L],
    testing_data: Sequence[tuple[L, I]],
    *,
    training_data: Sequence[tuple[L, I]] | None = None,
    cfg: EvaluationConfig | None = None,
    progress: ProgressSink | None = None,
) -> ConfusionMatrix[L]:
    """
    Optionally train, then test a classifier and log a summary.

    Errors raised by the classifier's train/classify propagate unchanged.

    Args:
        classifier: Classifier to evaluate
        testing_data: Held-out (true_label, example) pairs
        training_data: If given, passed to classifier.train() first
        cfg: Evaluation configuration (progress target/steps, nan_policy)
        progress: Explicit progress sink; overrides cfg.progress.target

    Returns:
        The populated ConfusionMatrix
    """
    cfg = cfg or EvaluationConfig()
    sink = progress if progress is not None else make_progress_sink(cfg)

    set_log_context(classifier=type(classifier).__name__)
    try:
        if training_data is not None:
            logger.info("Training on %d examples...", len(training_data))
            classifier.train(training_data)

        logger.info("Testing on %d examples...", len(testing_data))
        matrix = classifier.test(testing_data, sink, steps=cfg.progress.steps)

        if matrix.total == 0 and cfg.nan_policy is NanPolicy.RAISE:
            raise EmptyEvaluationError("Testing data was empty; error rate is undefined (nan_policy=raise).")

        log_evaluation_summary(matrix)
    finally:
        clear_evaluation_context()

    return matrix


def log_evaluation_summary(matrix: ConfusionMatrix) -> None:
    """Log a concise, human-readable evaluation summary."""
    logger.info("=== Evaluation Summary ===")

    rate = matrix.error_rate()
    if math.isnan(rate):
        logger.info("No classifications recorded; error rate: %s", UNDEFINED_RATE)
        return

    logger.info(
        "Recorded: %d (correct=%d, incorrect=%d)",
        matrix.total,
        matrix.total_right,
        matrix.total_wrong,
    )
    logger.info("Error rate: %.4f", rate)
    logger.info("Per-label results:\n%s", matrix.render().rstrip("\n"))
    logger.debug("Confusion matrix (rows=true label):\n%s", matrix.to_frame())
