# ranker.py
# Orders the global mapping by descending count, ties broken by ascending word.

from typing import Iterator, Mapping, Optional, Tuple

from .errors import InvalidArgumentError

Word = str
Count = int
RankedEntry = Tuple[Word, Count]


def rank(counts: Mapping[Word, Count], limit: Optional[int] = None) -> Iterator[RankedEntry]:
    """
    Return a one-shot iterator of (word, count) pairs: highest count first, then
    lexicographic so equal counts come out the same way on every run.
    `limit` keeps only the first N entries.
    """
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 0):
        raise InvalidArgumentError(f"limit must be a non-negative integer, got {limit!r}")
    ordered = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    if limit is not None:
        ordered = ordered[:limit]
    return iter(ordered)
