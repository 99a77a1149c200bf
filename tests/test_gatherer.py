import pytest

from ngram_cooc.analysis import RunningAverageGatherer, SlidingWindowGatherer, gather, running_sum
from ngram_cooc.analysis.gatherer import AverageState


def test_sliding_window_emits_overlapping_windows():
    assert gather(SlidingWindowGatherer(3), [1, 2, 3, 4, 5]) == [(1, 2, 3), (2, 3, 4), (3, 4, 5)]


def test_sliding_window_short_input_emits_partial_window():
    assert gather(SlidingWindowGatherer(4), ["a", "b"]) == [("a", "b")]


def test_sliding_window_empty_input():
    assert gather(SlidingWindowGatherer(2), []) == []


def test_sliding_window_rejects_invalid_size():
    with pytest.raises(ValueError):
        SlidingWindowGatherer(0)


def test_sliding_window_does_not_merge():
    gatherer = SlidingWindowGatherer(2)
    with pytest.raises(TypeError):
        gatherer.merge(gatherer.create_state(), gatherer.create_state())


def test_gatherer_instance_is_reusable():
    gatherer = SlidingWindowGatherer(2)
    assert gather(gatherer, "abc") == [("a", "b"), ("b", "c")]
    assert gather(gatherer, "xyz") == [("x", "y"), ("y", "z")]


def test_running_average():
    assert gather(RunningAverageGatherer(), [2, 4, 6, 8]) == [2.0, 3.0, 4.0, 5.0]


def test_running_average_merge_combines_partitions():
    gatherer = RunningAverageGatherer()
    left, right = gatherer.create_state(), gatherer.create_state()
    for value in (1, 2, 3):
        gatherer.update(left, value)
    for value in (10, 20):
        gatherer.update(right, value)

    merged = gatherer.merge(left, right)
    assert merged == AverageState(total=36, count=5)
    assert gatherer.update(merged, 0) == [6.0]


def test_running_sum():
    assert running_sum([1, 2, 3, 4, 5]) == [1, 3, 6, 10, 15]
    assert running_sum([]) == []


def test_running_sum_is_repeatable():
    values = [5, -2, 7]
    assert running_sum(values) == running_sum(values) == [5, 3, 10]
