# tests/test_trie.py

import pytest

from word_frequency.core import FrequencyTrie, InvalidArgumentError


@pytest.fixture
def trie():
    t = FrequencyTrie()
    t.insert("sat", 2)
    t.insert("the", 2)
    t.insert("cat", 1)
    return t


def test_lookup_after_insert(trie):
    assert trie.lookup("sat") == 2
    assert trie.lookup("cat") == 1


def test_accumulates(trie):
    trie.insert("cat", 4)
    assert trie.lookup("cat") == 5


def test_default_count_is_one():
    t = FrequencyTrie()
    t.insert("a")
    t.insert("a")
    assert t.lookup("a") == 2


def test_miss_returns_zero(trie):
    assert trie.lookup("dog") == 0
    assert trie.lookup("sa") == 0  # prefix only
    assert trie.lookup("sats") == 0
    assert trie.lookup("") == 0


def test_prefix_and_word_both_inserted():
    t = FrequencyTrie()
    t.insert("car", 3)
    t.insert("ca", 1)
    t.insert("cart", 2)
    assert t.lookup("ca") == 1
    assert t.lookup("car") == 3
    assert t.lookup("cart") == 2
    assert t.lookup("c") == 0


def test_lookup_miss_does_not_create_nodes(trie):
    trie.lookup("zebra")
    assert "z" not in trie._root.children


def test_empty_word_ignored():
    t = FrequencyTrie()
    t.insert("", 5)
    assert t.lookup("") == 0
    assert t._root.count == 0


def test_negative_count_rejected(trie):
    with pytest.raises(InvalidArgumentError):
        trie.insert("cat", -1)
    assert trie.lookup("cat") == 1


def test_unicode_words():
    t = FrequencyTrie()
    t.insert("café", 2)
    assert t.lookup("café") == 2
    assert t.lookup("cafe") == 0


def test_from_ranked_and_contains():
    t = FrequencyTrie.from_ranked(iter([("sat", 2), ("the", 2), ("zero", 0)]))
    assert t.lookup("the") == 2
    assert "sat" in t
    assert "zero" not in t
    assert "dog" not in t
