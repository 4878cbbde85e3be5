# word_frequency/text/normalizer.py

import re

from word_frequency.utils.cache_utils import simple_lru

# characters dropped before tokenizing unless the caller configures another set
DEFAULT_PUNCTUATION = ",.?!#$%^&*(~"


def canonical_punctuation(punctuation) -> str:
    """Sorted, de-duplicated string form of a drop set (str or iterable of chars)."""
    return "".join(sorted(set(punctuation or "")))


@simple_lru(maxsize=64)
def _drop_pattern(punctuation: str):
    return re.compile("[" + re.escape(punctuation) + "]+")


def strip_punctuation(s: str, punctuation=DEFAULT_PUNCTUATION) -> str:
    if not s:
        return ""
    drop = canonical_punctuation(punctuation)
    if not drop:
        return s
    return _drop_pattern(drop).sub("", s)
