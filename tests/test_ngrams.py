import pytest

from ngram_cooc.analysis import produce_ngrams, produce_ngrams_sliding

TOKENS = ["the", "cat", "sat", "on", "the", "mat"]


def test_bigrams_of_short_sentence():
    expected = ["the cat", "cat sat", "sat on", "on the", "the mat"]
    assert produce_ngrams(2, TOKENS) == expected
    assert produce_ngrams_sliding(2, TOKENS) == expected


@pytest.mark.parametrize("n", range(1, len(TOKENS) + 1))
def test_length_and_alignment(n):
    ngrams = produce_ngrams(n, TOKENS)
    assert len(ngrams) == len(TOKENS) - n + 1
    for i, ngram in enumerate(ngrams):
        parts = ngram.split(" ")
        assert len(parts) == n
        assert parts == TOKENS[i : i + n]


def test_unigrams_return_input_tokens():
    assert produce_ngrams(1, TOKENS) == TOKENS
    result = produce_ngrams_sliding(1, TOKENS)
    assert result == TOKENS
    assert all(a is b for a, b in zip(result, TOKENS))


@pytest.mark.parametrize("n", [-1, 0, len(TOKENS) + 1, 100])
def test_out_of_range_size_is_empty(n):
    assert produce_ngrams(n, TOKENS) == []
    assert produce_ngrams_sliding(n, TOKENS) == []


def test_empty_tokens():
    assert produce_ngrams(1, []) == []
    assert produce_ngrams_sliding(2, []) == []


@pytest.mark.parametrize(
    "tokens",
    [
        ["a"],
        ["a", "a", "a", "a"],
        ["die", "see", "ist", "tief", "und", "die", "see", "ist", "weit"],
        [f"w{i % 7}" for i in range(50)],
    ],
)
def test_strategies_agree(tokens):
    for n in range(0, len(tokens) + 2):
        assert produce_ngrams(n, tokens) == produce_ngrams_sliding(n, tokens)


def test_input_is_not_mutated():
    tokens = tuple(TOKENS)
    produce_ngrams(3, tokens)
    produce_ngrams_sliding(3, tokens)
    assert tokens == tuple(TOKENS)
