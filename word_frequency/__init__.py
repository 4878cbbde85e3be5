"""
word_frequency

Word-frequency statistics over in-memory text:
 - partition text into chunks
 - count words per chunk on a bounded worker pool
 - merge partial counts, rank them, and index them in a frequency trie
"""

from .core import (
    FrequencyReport,
    FrequencyTrie,
    WordFrequencyPipeline,
    WordFrequencySettings,
    aggregate,
    count_words,
    rank,
    split,
)

__all__ = [
    "FrequencyReport",
    "FrequencyTrie",
    "WordFrequencyPipeline",
    "WordFrequencySettings",
    "aggregate",
    "count_words",
    "rank",
    "split",
]

__version__ = "0.1.0"
