import logging
from logging.handlers import RotatingFileHandler

import pytest

from fakes import RecordingProgress


@pytest.fixture
def recording_progress() -> RecordingProgress:
    return RecordingProgress()


@pytest.fixture
def restore_root_logging():
    """Drop the console/file handlers installed by configure_logging()."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if isinstance(h, RotatingFileHandler) or type(h) is logging.StreamHandler:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
