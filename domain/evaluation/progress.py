"""Progress sinks notified by the evaluation driver."""

import logging
import sys
from abc import ABC, abstractmethod
from typing import TextIO

# Number of progress notifications over a full pass (one every 5%)
PROGRESS_STEPS = 20


class ProgressSink(ABC):
    """
    Receives coarse percentage updates while a classifier is being tested.

    All concrete sinks must implement:
    - update(): called with a percentage roughly every 1/steps of the dataset
    - finish(): called once after the last example
    """

    @abstractmethod
    def update(self, percent: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def finish(self) -> None:
        raise NotImplementedError


class StreamProgress(ProgressSink):
    """Writes `5%; 10%; ...` to a text stream, flushing after every write."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so a captured/redirected sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def update(self, percent: int) -> None:
        self.stream.write(f"{percent}%; ")
        self.stream.flush()

    def finish(self) -> None:
        self.stream.write("\n")
        self.stream.flush()


class NullProgress(ProgressSink):
    """Discards progress (headless runs)."""

    def update(self, percent: int) -> None:
        pass

    def finish(self) -> None:
        pass


class LoggingProgress(ProgressSink):
    """Routes progress through a logger instead of a raw stream."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def update(self, percent: int) -> None:
        self.logger.log(self.level, "Evaluation progress: %d%%", percent)

    def finish(self) -> None:
        self.logger.debug("Evaluation progress: done")
