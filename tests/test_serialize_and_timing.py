import json
from collections import OrderedDict

import pytest

from ngram_cooc.analysis import count_cooccurrences, find_top_k, produce_ngrams
from ngram_cooc.benchmark.timing import TimingResult, measure_time_to_execute
from ngram_cooc.io.serialize import read_cooccurrence_table, read_json, write_json


def test_outputs_serialize_without_transformation(tmp_path):
    tokens = ["über", "die", "see", "die", "see"]
    table = count_cooccurrences(2, tokens)

    write_json(produce_ngrams(2, tokens), tmp_path / "out" / "ngrams.json")
    write_json(table, tmp_path / "out" / "table.json")
    write_json(find_top_k("see", 2, table), tmp_path / "out" / "top.json")

    assert read_json(tmp_path / "out" / "ngrams.json") == ["über die", "die see", "see die", "die see"]
    assert read_cooccurrence_table(tmp_path / "out" / "table.json") == table
    assert list(read_json(tmp_path / "out" / "top.json")) == list(find_top_k("see", 2, table))
    assert "über" in (tmp_path / "out" / "ngrams.json").read_text(encoding="utf-8")


def test_read_json_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_json(tmp_path / "nope.json")


def test_read_json_malformed(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        read_json(path)


@pytest.mark.parametrize(
    "payload",
    [["a"], {"a": ["b"]}, {"a": {"b": "2"}}, {"a": {"b": True}}],
)
def test_read_cooccurrence_table_rejects_bad_shapes(tmp_path, payload):
    path = tmp_path / "table.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ValueError):
        read_cooccurrence_table(path)


def test_measure_runs_warmup_and_measurement():
    calls = []
    result = measure_time_to_execute("noop", lambda: calls.append(1), warmup_runs=3, measure_runs=4)
    assert isinstance(result, TimingResult)
    assert result.name == "noop"
    assert result.runs == 4
    assert result.mean_ms >= 0
    assert len(calls) == 7


def test_measure_rejects_zero_runs():
    with pytest.raises(ValueError):
        measure_time_to_execute("noop", lambda: None, warmup_runs=0, measure_runs=0)


def test_top_k_keeps_order_in_json(tmp_path):
    top = OrderedDict([("z", 3), ("a", 1)])
    write_json(top, tmp_path / "top.json")
    assert list(read_json(tmp_path / "top.json").items()) == [("z", 3), ("a", 1)]
