"""Progress sink construction from configuration."""

from infrastructure.progress.factory import make_progress_sink

__all__ = ["make_progress_sink"]
