# word_frequency/core/pipeline.py
# text -> chunks -> global mapping -> ranked -> trie

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from word_frequency.text import DEFAULT_PUNCTUATION
from word_frequency.utils.cache_utils import timed

from .aggregator import DEFAULT_MAX_WORKERS, aggregate
from .chunk_counter import FrequencyMap
from .partitioner import split
from .errors import InvalidArgumentError
from .ranker import RankedEntry, rank
from .trie import FrequencyTrie

logger = logging.getLogger(__name__)


@dataclass
class WordFrequencySettings:
    """
    chunk_size: characters per chunk handed to one counting task
    punctuation: set of characters to strip before tokenizing
    max_workers: size of the counting thread pool
    on_whitespace: move chunk cuts back to whitespace so no word is split
    """
    chunk_size: int = 100
    punctuation: str = DEFAULT_PUNCTUATION
    max_workers: int = DEFAULT_MAX_WORKERS
    on_whitespace: bool = False


@dataclass
class FrequencyReport:
    counts: FrequencyMap
    ranked: List[RankedEntry]
    trie: FrequencyTrie
    chunk_count: int = 0
    elapsed: float = 0.0
    settings: WordFrequencySettings = field(default_factory=WordFrequencySettings)

    def lookup(self, word: str) -> int:
        return self.trie.lookup(word)

    def top(self, n: int) -> List[RankedEntry]:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InvalidArgumentError(f"n must be a non-negative integer, got {n!r}")
        return self.ranked[:n]

    @property
    def total_words(self) -> int:
        return sum(self.counts.values())


class WordFrequencyPipeline:
    """
    Runs the whole counting flow for one in-memory text.
    Partitioning, merging, ranking and trie building stay on the calling thread;
    only chunk counting runs on the worker pool.
    """

    def __init__(self, settings: Optional[WordFrequencySettings] = None):
        self.settings = settings or WordFrequencySettings()

    @timed
    def _stages(self, text: str, cancel_event: Optional[threading.Event]):
        s = self.settings
        chunks = split(text, s.chunk_size, on_whitespace=s.on_whitespace)
        counts = aggregate(
            chunks,
            punctuation=s.punctuation,
            max_workers=s.max_workers,
            cancel_event=cancel_event,
        )
        ranked = list(rank(counts))
        return chunks, counts, ranked, FrequencyTrie.from_ranked(ranked)

    def run(self, text: str, cancel_event: Optional[threading.Event] = None) -> FrequencyReport:
        (chunks, counts, ranked, trie), elapsed = self._stages(text, cancel_event)
        logger.info(
            "counted %d distinct words in %d chunks (%.3fs)", len(ranked), len(chunks), elapsed
        )
        return FrequencyReport(
            counts=counts,
            ranked=ranked,
            trie=trie,
            chunk_count=len(chunks),
            elapsed=elapsed,
            settings=self.settings,
        )
