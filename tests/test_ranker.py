# tests/test_ranker.py

import pytest

from word_frequency.core import InvalidArgumentError, rank


def test_descending_with_lexicographic_tie_break():
    counts = {"the": 2, "cat": 1, "sat": 2, "dog": 1}
    assert list(rank(counts)) == [("sat", 2), ("the", 2), ("cat", 1), ("dog", 1)]


def test_totality():
    counts = {f"w{i}": (i * 7) % 5 for i in range(50)}
    ranked = list(rank(counts))
    words = [w for w, _ in ranked]
    assert len(words) == len(set(words)) == len(counts)
    assert dict(ranked) == counts
    values = [c for _, c in ranked]
    assert values == sorted(values, reverse=True)


def test_one_shot_iterator():
    it = rank({"a": 1})
    assert list(it) == [("a", 1)]
    assert list(it) == []


def test_limit():
    counts = {"a": 3, "b": 2, "c": 1}
    assert list(rank(counts, limit=2)) == [("a", 3), ("b", 2)]
    assert list(rank(counts, limit=0)) == []
    with pytest.raises(InvalidArgumentError):
        rank(counts, limit=-1)


def test_empty_mapping():
    assert list(rank({})) == []


@pytest.mark.parametrize("bad", [True, 2.5, "2"])
def test_limit_must_be_an_int(bad):
    with pytest.raises(InvalidArgumentError):
        rank({"a": 1, "b": 2}, limit=bad)
