# word_frequency/text/__init__.py
# text normalization and tokenization helpers used by the chunk counter

from .normalizer import DEFAULT_PUNCTUATION, canonical_punctuation, strip_punctuation
from .tokenizer import tokenize

__all__ = [
    "DEFAULT_PUNCTUATION",
    "canonical_punctuation",
    "strip_punctuation",
    "tokenize",
]
