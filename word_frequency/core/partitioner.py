# partitioner.py
# Splits raw text into consecutive chunks of at most `chunk_size` characters.
# Python strings index by code point, so multi-byte characters are never cut.

import logging
from typing import List

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

Chunk = str


def split(text: str, chunk_size: int, on_whitespace: bool = False) -> List[Chunk]:
    """
    Partition `text` into non-overlapping chunks whose concatenation is `text`.

    With on_whitespace=False the text is cut every `chunk_size` characters, so a
    word sitting on a boundary is counted as two fragments. With on_whitespace=True
    each cut moves back to just after the last whitespace inside the window; a
    window without whitespace keeps the hard cut.
    """
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise InvalidArgumentError(f"chunk_size must be a positive integer, got {chunk_size!r}")
    if not text:
        return []

    n = len(text)
    chunks: List[Chunk] = []
    start = 0
    while start < n:
        end = min(start + chunk_size, n)
        if on_whitespace and end < n:
            end = _last_break(text, start, end)
        chunks.append(text[start:end])
        start = end

    logger.debug("split %d chars into %d chunks (chunk_size=%d)", n, len(chunks), chunk_size)
    return chunks


def _last_break(text: str, start: int, end: int) -> int:
    """Cut position in (start, end] that does not fall inside a word."""
    if text[end].isspace() or text[end - 1].isspace():
        return end
    cut = end - 1
    while cut > start and not text[cut - 1].isspace():
        cut -= 1
    return cut if cut > start else end
