# errors.py - exception hierarchy for the counting pipeline


class WordFrequencyError(Exception):
    """Base class for every error raised by word_frequency."""


class InvalidArgumentError(WordFrequencyError, ValueError):
    """Raised when a caller passes an out-of-range parameter (chunk size, worker count...)."""


class AggregationError(WordFrequencyError, RuntimeError):
    """
    Raised when a counting task fails during aggregation.
    No partial result is returned: a dropped partial mapping would corrupt the totals.
    """


class AggregationCancelled(AggregationError):
    """Raised when aggregation is stopped through its cancel event."""
