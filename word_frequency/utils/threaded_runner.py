# threaded_runner.py - bounded thread pool that yields results as tasks complete.

import logging
import threading
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from typing import Callable, Iterable, Iterator, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class TaskCancelled(Exception):
    """Raised by iter_parallel when its cancel event is set."""


def iter_parallel(
    fn: Callable[[T], R],
    items: Iterable[T],
    max_workers: Optional[int] = 4,
    cancel_event: Optional[threading.Event] = None,
) -> Iterator[R]:
    """
    Run fn(item) for every item on at most `max_workers` threads and yield each
    result in order of completion. Each item is handed to exactly one task and each
    result is yielded exactly once.

    The first task failure cancels everything not yet started and is re-raised
    to the consumer. Setting `cancel_event` does the same with TaskCancelled.
    """
    items = list(items)
    if not items:
        return

    def _run(item):
        # tasks still queued when cancellation arrives never touch their item
        if cancel_event is not None and cancel_event.is_set():
            raise TaskCancelled()
        return fn(item)

    # wake up periodically only when there is a cancel event to watch
    poll = 0.05 if cancel_event is not None else None

    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        pending = {ex.submit(_run, item) for item in items}
        logger.debug("submitted %d tasks (max_workers=%s)", len(pending), max_workers)
        try:
            while pending:
                done, pending = wait(pending, timeout=poll, return_when=FIRST_COMPLETED)
                for fut in done:
                    yield fut.result()
                if cancel_event is not None and cancel_event.is_set() and pending:
                    raise TaskCancelled()
        except BaseException:
            for fut in pending:
                fut.cancel()
            raise
