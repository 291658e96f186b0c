import math
import random

from domain.evaluation.confusion import ConfusionMatrix


def _record_many(matrix: ConfusionMatrix, true_label, predicted_label, times: int) -> None:
    for _ in range(times):
        matrix.record(true_label, predicted_label)


def test_render_matches_reference_report() -> None:
    matrix = ConfusionMatrix()
    _record_many(matrix, 1, 1, 6)
    _record_many(matrix, 1, 2, 4)
    _record_many(matrix, 2, 2, 7)
    _record_many(matrix, 2, 1, 3)

    assert str(matrix) == "1: 6 correct, 4 incorrect\n2: 7 correct, 3 incorrect\n"
    assert matrix.render() == str(matrix)


def test_wrong_counts_are_keyed_by_true_label() -> None:
    matrix = ConfusionMatrix()
    matrix.record("cat", "dog")

    assert matrix.wrong_count("cat") == 1
    assert matrix.wrong_count("dog") == 0
    assert matrix.right_count("cat") == 0
    assert matrix.all_labels() == {"cat"}


def test_all_labels_is_union_of_true_labels() -> None:
    matrix = ConfusionMatrix()
    matrix.record("a", "a")  # right only
    matrix.record("b", "a")  # wrong only
    matrix.record("c", "c")
    matrix.record("c", "x")  # both

    assert matrix.all_labels() == {"a", "b", "c"}
    assert "x" not in matrix.all_labels()


def test_per_label_counts_sum_to_records() -> None:
    pairs = [(1, 1), (1, 2), (1, 3), (2, 2), (3, 1), (3, 3), (3, 3)]
    matrix = ConfusionMatrix()
    for true_label, predicted in pairs:
        matrix.record(true_label, predicted)

    for label in (1, 2, 3):
        expected = sum(1 for t, _ in pairs if t == label)
        assert matrix.right_count(label) + matrix.wrong_count(label) == expected
    assert matrix.total == len(pairs) == len(matrix)


def test_error_rate() -> None:
    matrix = ConfusionMatrix()
    _record_many(matrix, "x", "x", 3)
    _record_many(matrix, "y", "x", 1)

    assert matrix.total_right == 3
    assert matrix.total_wrong == 1
    assert matrix.error_rate() == 0.25


def test_error_rate_is_nan_when_empty() -> None:
    matrix = ConfusionMatrix()

    assert math.isnan(matrix.error_rate())
    assert matrix.all_labels() == set()
    assert matrix.render() == ""


def test_render_is_independent_of_insertion_order() -> None:
    pairs = [(3, 3), (1, 2), (2, 2), (1, 1), (3, 1), (2, 3)] * 5
    shuffled = list(pairs)
    random.Random(7).shuffle(shuffled)

    a, b = ConfusionMatrix(), ConfusionMatrix()
    for true_label, predicted in pairs:
        a.record(true_label, predicted)
    for true_label, predicted in shuffled:
        b.record(true_label, predicted)

    assert a.render() == b.render()
    assert a.render() == a.render()
    assert [line.split(":")[0] for line in a.render().splitlines()] == ["1", "2", "3"]


def test_labels_sorted_by_natural_order_not_string_order() -> None:
    matrix = ConfusionMatrix()
    matrix.record(10, 10)
    matrix.record(9, 9)

    assert matrix.render() == "9: 1 correct, 0 incorrect\n10: 1 correct, 0 incorrect\n"


def test_lookups_do_not_add_labels() -> None:
    matrix = ConfusionMatrix()
    matrix.record("a", "a")

    assert matrix.right_count("missing") == 0
    assert matrix.wrong_count("missing") == 0
    assert matrix.all_labels() == {"a"}


def test_to_frame() -> None:
    matrix = ConfusionMatrix()
    _record_many(matrix, "b", "b", 2)
    _record_many(matrix, "a", "b", 1)

    df = matrix.to_frame()

    assert list(df.index) == ["a", "b"]
    assert df.loc["a", "correct"] == 0
    assert df.loc["a", "incorrect"] == 1
    assert df.loc["b", "correct"] == 2
    assert df.loc["b", "incorrect"] == 0
