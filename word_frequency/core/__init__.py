"""
word_frequency.core

The counting pipeline:
 - Partitioner (split)
 - Chunk Counter (count_words)
 - Aggregator (aggregate, merge_into)
 - Ranker (rank)
 - Frequency Trie (FrequencyTrie)
 - WordFrequencyPipeline wiring them together
"""

from .errors import (
    AggregationCancelled,
    AggregationError,
    InvalidArgumentError,
    WordFrequencyError,
)
from .partitioner import split
from .chunk_counter import count_words
from .aggregator import aggregate, merge_into
from .ranker import rank
from .trie import FrequencyTrie, TrieNode
from .pipeline import FrequencyReport, WordFrequencyPipeline, WordFrequencySettings

__all__ = [
    "AggregationCancelled",
    "AggregationError",
    "InvalidArgumentError",
    "WordFrequencyError",
    "split",
    "count_words",
    "aggregate",
    "merge_into",
    "rank",
    "FrequencyTrie",
    "TrieNode",
    "FrequencyReport",
    "WordFrequencyPipeline",
    "WordFrequencySettings",
]
