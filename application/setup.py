"""Load evaluation settings and configure logging in one step."""

import logging
from pathlib import Path

from infrastructure.config import EvaluationConfig, load_evaluation_config
from infrastructure.constants import EVALUATION_FILE
from infrastructure.observability import configure_logging, set_log_context

logger = logging.getLogger(__name__)


def prepare_evaluation(
    config_path: Path | None = None,
    *,
    run_id: str | None = None,
) -> EvaluationConfig:
    """
    Resolve an EvaluationConfig and configure logging from it.

    Args:
        config_path: YAML file to load. Defaults to configs/evaluation.yaml when it
            exists, otherwise built-in defaults are used.
        run_id: Optional run identifier; its short tag is attached to every log line

    Returns:
        The resolved EvaluationConfig
    """
    if config_path is not None:
        cfg = load_evaluation_config(config_path)
    elif EVALUATION_FILE.exists():
        cfg = load_evaluation_config(EVALUATION_FILE)
    else:
        cfg = EvaluationConfig()

    configure_logging(
        log_file=cfg.logging.log_file,
        console_level=cfg.logging.console_level_no,
        file_level=cfg.logging.file_level_no,
    )
    if run_id is not None:
        set_log_context(run_id_full=run_id)

    logger.debug("Evaluation config: %s", cfg.model_dump(mode="json"))
    return cfg
