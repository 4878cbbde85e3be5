# cache_utils.py - memoizing and timing decorators shared by the pipeline

import time
from functools import lru_cache, wraps
from typing import Any, Callable, Tuple


def timed(func: Callable) -> Callable[..., Tuple[Any, float]]:
    """Wrap `func` so a call returns (result, seconds spent)."""
    @wraps(func)
    def _wrap(*a, **kw):
        t0 = time.perf_counter()
        res = func(*a, **kw)
        return res, time.perf_counter() - t0
    return _wrap


def simple_lru(maxsize: int = 128):
    """lru_cache with a keyword-only size, usable as @simple_lru(maxsize=...)."""
    def _decor(fn):
        return lru_cache(maxsize=maxsize)(fn)
    return _decor
