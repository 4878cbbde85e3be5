# tests/test_partitioner.py
# split(): round trip, chunk sizes, whitespace-boundary mode and bad sizes

import pytest

from word_frequency.core import InvalidArgumentError, split

TEXT = "the cat sat. the dog sat! héllo wörld, naïve café"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 10, 100])
def test_round_trip(size):
    chunks = split(TEXT, size)
    assert "".join(chunks) == TEXT
    assert all(0 < len(c) <= size for c in chunks)
    # only the last chunk may be short
    assert all(len(c) == size for c in chunks[:-1])


def test_empty_text_gives_no_chunks():
    assert split("", 5) == []


def test_multibyte_characters_not_cut():
    text = "日本語のテキスト"
    chunks = split(text, 3)
    assert chunks == ["日本語", "のテキ", "スト"]


@pytest.mark.parametrize("bad", [0, -1, 2.5, True, "10", None])
def test_bad_chunk_size(bad):
    with pytest.raises(InvalidArgumentError):
        split("abc", bad)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        split("abc", 0)


def test_hard_cut_can_split_a_word():
    assert split("hello world", 3) == ["hel", "lo ", "wor", "ld"]


def test_whitespace_mode_keeps_words_whole():
    chunks = split("hello big world", 8, on_whitespace=True)
    assert chunks == ["hello ", "big ", "world"]
    assert "".join(chunks) == "hello big world"


def test_whitespace_mode_falls_back_to_hard_cut_for_long_words():
    chunks = split("abcdefghij xy", 4, on_whitespace=True)
    assert chunks[0] == "abcd"
    assert "".join(chunks) == "abcdefghij xy"
    assert all(len(c) <= 4 for c in chunks)


@pytest.mark.parametrize("size", [1, 4, 5, 9, 50])
def test_whitespace_mode_round_trip(size):
    chunks = split(TEXT, size, on_whitespace=True)
    assert "".join(chunks) == TEXT
    assert all(0 < len(c) <= size for c in chunks)
