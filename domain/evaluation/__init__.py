"""
Classifier evaluation primitives.

Provides:
- ConfusionMatrix: per-label correct/incorrect tally, error rate, text report
- Classifier: abstract train/classify interface with a shared test driver
- Progress sinks notified while a classifier is being tested

Everything here is pure apart from the progress sinks, which only write to
the stream or logger they are given.
"""

from domain.evaluation.classifier import Classifier
from domain.evaluation.confusion import ConfusionMatrix
from domain.evaluation.progress import (
    PROGRESS_STEPS,
    LoggingProgress,
    NullProgress,
    ProgressSink,
    StreamProgress,
)

__all__ = [
    "ConfusionMatrix",
    "Classifier",
    "ProgressSink",
    "StreamProgress",
    "NullProgress",
    "LoggingProgress",
    "PROGRESS_STEPS",
]
