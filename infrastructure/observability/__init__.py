"""
Observability: structured logging and context management.

Provides:
- Contextual logging with run tag and classifier name
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    clear_evaluation_context,
    configure_logging,
    get_log_context,
    make_run_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "get_log_context",
    "clear_evaluation_context",
    "make_run_tag",
]
