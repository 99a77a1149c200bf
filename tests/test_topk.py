from collections import OrderedDict

import pytest

from ngram_cooc.analysis import count_cooccurrences, find_top_k

TABLE = {
    "see": {"die": 7, "tief": 3, "weit": 3, "blau": 5, "ist": 1},
    "a": {"b": 2, "c": 1},
}


def test_top_one_of_small_table():
    table = count_cooccurrences(1, ["a", "b", "a", "c"])
    top = find_top_k("a", 1, table)
    assert isinstance(top, OrderedDict)
    assert top == OrderedDict([("b", 2)])


def test_descending_order_with_lexicographic_ties():
    top = find_top_k("see", 4, TABLE)
    assert list(top.items()) == [("die", 7), ("blau", 5), ("tief", 3), ("weit", 3)]


def test_truncates_to_k():
    top = find_top_k("see", 2, TABLE)
    assert list(top) == ["die", "blau"]


@pytest.mark.parametrize("k", range(0, 8))
def test_length_and_dominance(k):
    top = find_top_k("see", k, TABLE)
    assert len(top) == min(k, len(TABLE["see"]))
    left_out = [count for word, count in TABLE["see"].items() if word not in top]
    assert all(kept >= dropped for kept in top.values() for dropped in left_out)


def test_missing_center_is_empty():
    assert find_top_k("meer", 3, TABLE) == OrderedDict()


@pytest.mark.parametrize("k", [0, -2])
def test_non_positive_k_is_empty(k):
    assert find_top_k("see", k, TABLE) == OrderedDict()


def test_center_word_is_lowercased():
    assert list(find_top_k("See", 1, TABLE)) == ["die"]


def test_table_is_not_mutated():
    before = {center: dict(neighbors) for center, neighbors in TABLE.items()}
    find_top_k("see", 3, TABLE)
    assert TABLE == before


def test_mixed_case_table_is_looked_up_exactly_first():
    table = count_cooccurrences(1, ["A", "B", "a", "c"])
    assert find_top_k("A", 1, table) == OrderedDict([("B", 1)])
    assert find_top_k("a", 2, table) == OrderedDict([("B", 1), ("c", 1)])
