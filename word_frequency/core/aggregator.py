# aggregator.py
"""
Fan-out/fan-in word counting.

Chunks are counted on a bounded thread pool; each partial mapping is handed back
to the calling thread as its task completes and merged there, so the global
mapping has a single writer. Completion order never changes the result because
the merge is a per-word sum.
"""

import logging
import threading
from functools import partial
from typing import Iterable, Optional

from word_frequency.text import DEFAULT_PUNCTUATION, canonical_punctuation
from word_frequency.utils.threaded_runner import TaskCancelled, iter_parallel

from .chunk_counter import FrequencyMap, count_words
from .errors import AggregationCancelled, AggregationError, InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 4


def merge_into(total: FrequencyMap, part: FrequencyMap) -> FrequencyMap:
    """Add every count of `part` into `total` in place and return `total`."""
    for word, n in part.items():
        total[word] = total.get(word, 0) + n
    return total


def aggregate(
    chunks: Iterable[str],
    punctuation=DEFAULT_PUNCTUATION,
    max_workers: Optional[int] = DEFAULT_MAX_WORKERS,
    cancel_event: Optional[threading.Event] = None,
) -> FrequencyMap:
    """
    Count every chunk concurrently and merge the partial mappings.

    Returns only after every task finished and every partial mapping was merged once.
    A failing task raises AggregationError and a set `cancel_event` raises
    AggregationCancelled; neither returns partial totals.
    """
    if max_workers is not None and (isinstance(max_workers, bool) or max_workers <= 0):
        raise InvalidArgumentError(f"max_workers must be a positive integer, got {max_workers!r}")

    chunks = list(chunks)
    total: FrequencyMap = {}
    if not chunks:
        return total

    counter = partial(count_words, punctuation=canonical_punctuation(punctuation))
    merged = 0
    try:
        for part in iter_parallel(counter, chunks, max_workers=max_workers, cancel_event=cancel_event):
            merge_into(total, part)
            merged += 1
    except TaskCancelled as e:
        raise AggregationCancelled(
            f"aggregation cancelled after {merged} of {len(chunks)} chunks"
        ) from e
    except Exception as e:
        raise AggregationError(f"counting task failed: {e}") from e

    logger.debug("merged %d partial mappings into %d distinct words", merged, len(total))
    return total
