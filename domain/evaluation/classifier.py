"""Base interface for trainable classifiers, with a shared test driver."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Hashable, Sequence
from typing import Generic, TypeVar

from domain.evaluation.confusion import ConfusionMatrix
from domain.evaluation.progress import PROGRESS_STEPS, ProgressSink, StreamProgress

logger = logging.getLogger(__name__)

I = TypeVar("I")  # noqa: E741
L = TypeVar("L", bound=Hashable)


class Classifier(ABC, Generic[I, L]):
    """
    Abstract base class for classifiers that can be evaluated on labeled data.

    All concrete classifiers must implement:
    - train(): build internal state from (label, example) pairs
    - classify(): return exactly one label for an example

    `test()` is shared by every implementation and should not be overridden.
    """

    @abstractmethod
    def train(self, training_data: Sequence[tuple[L, I]]) -> None:
        """Fit the classifier; it must be usable by `classify` afterwards."""
        raise NotImplementedError

    @abstractmethod
    def classify(self, example: I) -> L:
        """Predict a label. There is no error channel: always return some label."""
        raise NotImplementedError

    def test(
        self,
        testing_data: Sequence[tuple[L, I]],
        progress: ProgressSink | None = None,
        *,
        steps: int = PROGRESS_STEPS,
    ) -> ConfusionMatrix[L]:
        """
        Classify every example in order and tally the outcomes.

        Progress is reported every `len(testing_data) // steps` examples as
        `count * 100 // (chunk * steps)` percent; with the default 20 steps
        this is `count * 5 // twentieth`. Integer division makes the last
        updates uneven when the size is not a multiple of `steps`. Datasets
        smaller than `steps` report no progress at all.

        Args:
            testing_data: Ordered (true_label, example) pairs
            progress: Sink for percentage updates (default: stdout)
            steps: Number of progress updates over a full pass

        Returns:
            ConfusionMatrix with exactly len(testing_data) records
        """
        if steps < 1:
            raise ValueError(f"steps must be >= 1, got {steps}")

        sink = progress if progress is not None else StreamProgress()
        result: ConfusionMatrix[L] = ConfusionMatrix()

        chunk = len(testing_data) // steps
        logger.debug(
            "Testing %s on %d examples (progress every %d)",
            type(self).__name__,
            len(testing_data),
            chunk,
        )

        for count, (true_label, example) in enumerate(testing_data, start=1):
            result.record(true_label, self.classify(example))
            # chunk == 0 when the dataset is smaller than `steps`
            if chunk and count % chunk == 0:
                sink.update(count * 100 // (chunk * steps))

        sink.finish()
        return result
