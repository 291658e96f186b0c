"""Factory for creating progress sinks from configuration."""

import logging
import sys
from collections.abc import Callable

from domain.evaluation.progress import LoggingProgress, NullProgress, ProgressSink, StreamProgress
from infrastructure.config.models import EvaluationConfig, ProgressTarget

logger = logging.getLogger(__name__)

# ProgressTarget -> sink builder
_SINK_BUILDERS: dict[ProgressTarget, Callable[[], ProgressSink]] = {
    ProgressTarget.STDOUT: lambda: StreamProgress(sys.stdout),
    ProgressTarget.STDERR: lambda: StreamProgress(sys.stderr),
    ProgressTarget.LOG: lambda: LoggingProgress(logging.getLogger("evaluation.progress")),
    ProgressTarget.NONE: NullProgress,
}


def make_progress_sink(cfg: EvaluationConfig | None = None) -> ProgressSink:
    """
    Create the progress sink selected by `cfg.progress.target`.

    Args:
        cfg: Evaluation configuration (defaults to EvaluationConfig())

    Returns:
        A ProgressSink instance

    Raises:
        RuntimeError: If no builder is registered for the target
    """
    cfg = cfg or EvaluationConfig()
    target = cfg.progress.target

    builder = _SINK_BUILDERS.get(target)
    if builder is None:
        raise RuntimeError(f"No progress sink registered for target='{target.value}'")

    sink = builder()
    logger.debug("Progress sink for target=%s: %s", target.value, type(sink).__name__)
    return sink
