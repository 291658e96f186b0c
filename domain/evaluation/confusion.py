"""Per-label right/wrong tally for classification outcomes."""

from collections import Counter
from collections.abc import Hashable
from typing import Generic, TypeVar

import pandas as pd

L = TypeVar("L", bound=Hashable)


class ConfusionMatrix(Generic[L]):
    """
    Simplified confusion matrix: correct and incorrect counts per true label.

    Misclassifications are tallied under the ground-truth label, not the label
    the example was mistaken for, so each row answers "how often was class X
    found". The matrix is append-only; counts change only through `record`.
    """

    def __init__(self) -> None:
        self._right: Counter[L] = Counter()
        self._wrong: Counter[L] = Counter()

    def record(self, true_label: L, predicted_label: L) -> None:
        if predicted_label == true_label:
            self._right[true_label] += 1
        else:
            self._wrong[true_label] += 1

    def all_labels(self) -> set[L]:
        """Every true label recorded so far, correct or not."""
        return set(self._right) | set(self._wrong)

    def right_count(self, label: L) -> int:
        return self._right[label]

    def wrong_count(self, label: L) -> int:
        return self._wrong[label]

    @property
    def total_right(self) -> int:
        return sum(self._right.values())

    @property
    def total_wrong(self) -> int:
        return sum(self._wrong.values())

    @property
    def total(self) -> int:
        return self.total_right + self.total_wrong

    def error_rate(self) -> float:
        """
        Fraction of recorded classifications that were incorrect.

        Returns NaN when nothing has been recorded: callers must read that as
        "no data", not as a zero error rate.
        """
        total = self.total
        if total == 0:
            return float("nan")
        return self.total_wrong / total

    def sorted_labels(self) -> list[L]:
        return sorted(self.all_labels())  # ty: ignore

    def render(self) -> str:
        """One newline-terminated line per label, ascending by label."""
        return "".join(
            f"{label}: {self._right[label]} correct, {self._wrong[label]} incorrect\n"
            for label in self.sorted_labels()
        )

    def to_frame(self) -> pd.DataFrame:
        """Report as a DataFrame (rows=true label, cols=correct/incorrect)."""
        labels = self.sorted_labels()
        return pd.DataFrame(
            {
                "correct": [self._right[label] for label in labels],
                "incorrect": [self._wrong[label] for label in labels],
            },
            index=pd.Index(labels, name="label"),
        )

    def __len__(self) -> int:
        return self.total

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ConfusionMatrix(labels={len(self.all_labels())}, right={self.total_right}, wrong={self.total_wrong})"
