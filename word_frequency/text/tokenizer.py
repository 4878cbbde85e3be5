# word_frequency/text/tokenizer.py
# whitespace tokenizer on top of the punctuation drop set

from typing import List

from .normalizer import DEFAULT_PUNCTUATION, strip_punctuation


def tokenize(s: str, punctuation=DEFAULT_PUNCTUATION) -> List[str]:
    """
    Return lower-cased tokens of `s`.
    Punctuation is removed first (so "sat." and "sat" are the same word and "don't"
    stays one token), then the text is split on runs of whitespace.
    """
    if not s:
        return []
    return [t.lower() for t in strip_punctuation(s, punctuation).split()]
