from collections import Counter

import pytest

from ngram_cooc.analysis import (
    AggregationError,
    AggregationState,
    CooccurrenceAggregation,
    count_cooccurrences,
    count_cooccurrences_once,
)
from ngram_cooc.analysis import cooccurrence

ENTRY_POINTS = [count_cooccurrences, count_cooccurrences_once]

SAMPLES = [
    ["a", "b", "a", "c"],
    ["the", "cat", "sat", "on", "the", "mat"],
    ["x", "x", "x"],
    [f"w{(i * 3) % 5}" for i in range(40)],
]


def brute_force(window, tokens):
    table = {}
    for i, center in enumerate(tokens):
        counts = table.setdefault(center, Counter())
        for j, neighbor in enumerate(tokens):
            if j != i and abs(i - j) <= window:
                counts[neighbor] += 1
    return {center: dict(counts) for center, counts in table.items()}


@pytest.mark.parametrize("count", ENTRY_POINTS)
def test_repeated_center_tokens_are_summed(count):
    table = count(1, ["a", "b", "a", "c"])
    assert table["a"] == {"b": 2, "c": 1}
    assert table["b"] == {"a": 2}
    assert table["c"] == {"a": 1}


@pytest.mark.parametrize("count", ENTRY_POINTS)
@pytest.mark.parametrize("window", [-3, 0])
def test_window_below_one_is_empty(count, window):
    assert count(window, ["a", "b", "a", "c"]) == {}


@pytest.mark.parametrize("count", ENTRY_POINTS)
def test_window_larger_than_tokens_is_empty(count):
    assert count(5, ["a", "b", "a", "c"]) == {}
    assert count(1, []) == {}


@pytest.mark.parametrize("count", ENTRY_POINTS)
@pytest.mark.parametrize("tokens", SAMPLES)
def test_counts_match_pair_definition(count, tokens):
    for window in range(1, len(tokens) + 1):
        assert count(window, tokens) == brute_force(window, tokens)


def test_single_token_has_empty_neighbor_map():
    assert count_cooccurrences(1, ["solo"]) == {"solo": {}}
    assert count_cooccurrences_once(1, ["solo"]) == {"solo": {}}


@pytest.mark.parametrize("tokens", SAMPLES)
def test_entry_points_agree(tokens):
    for window in range(0, len(tokens) + 2):
        assert count_cooccurrences(window, tokens) == count_cooccurrences_once(window, tokens)


def test_input_is_not_mutated():
    tokens = ["a", "b", "a", "c"]
    count_cooccurrences(2, tokens)
    count_cooccurrences_once(2, tokens)
    assert tokens == ["a", "b", "a", "c"]


def test_aggregation_runs_once_and_returns_cached_table():
    aggregation = CooccurrenceAggregation(["a", "b", "a", "c"], window=1)
    assert aggregation.state is AggregationState.PENDING

    first = aggregation.aggregate()
    assert aggregation.state is AggregationState.COMPLETED

    second = aggregation.aggregate()
    assert second is first
    assert second == {"a": {"b": 2, "c": 1}, "b": {"a": 2}, "c": {"a": 1}}


def test_fold_emits_exactly_one_table():
    tokens = ["a", "b", "a", "c"]
    aggregation = CooccurrenceAggregation(tokens, window=1)
    results = list(aggregation.fold(tokens))
    assert len(results) == 1
    assert results[0] == count_cooccurrences(1, tokens)


def test_fold_over_empty_stream_emits_nothing():
    aggregation = CooccurrenceAggregation(["a"], window=1)
    assert list(aggregation.fold([])) == []
    assert aggregation.state is AggregationState.PENDING


def test_repeated_calls_get_fresh_tables():
    tokens = ["a", "b", "a", "c"]
    first = count_cooccurrences_once(1, tokens)
    second = count_cooccurrences_once(1, tokens)
    assert first == second
    assert first is not second


def test_missing_result_raises_aggregation_error(monkeypatch):
    monkeypatch.setattr(CooccurrenceAggregation, "fold", lambda self, elements: iter(()))
    with pytest.raises(AggregationError):
        cooccurrence.count_cooccurrences_once(1, ["a", "b"])


def test_counts_are_unbounded_ints():
    tokens = ["a", "b"] * 500
    table = count_cooccurrences(len(tokens), tokens)
    assert table["a"]["b"] == 500 * 500
    assert table["a"]["a"] == 500 * 499


@pytest.mark.parametrize("window", [-1, 0, 3, 5])
def test_aggregation_out_of_range_window_completes_empty(window):
    aggregation = CooccurrenceAggregation(["a", "b"], window=window)
    table = aggregation.aggregate()
    assert table == {}
    assert aggregation.state is AggregationState.COMPLETED
    assert aggregation.aggregate() is table
