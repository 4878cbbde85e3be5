# chunk_counter.py
# Word counts for a single chunk. Pure: no shared state, safe on any thread.

from collections import Counter
from typing import Dict

from word_frequency.text import DEFAULT_PUNCTUATION, tokenize

Word = str
FrequencyMap = Dict[Word, int]


def count_words(chunk: str, punctuation=DEFAULT_PUNCTUATION) -> FrequencyMap:
    """
    Return word -> occurrences within `chunk` only.
    Empty, whitespace-only and punctuation-only chunks give an empty mapping.
    """
    return dict(Counter(tokenize(chunk, punctuation)))
