"""Fixed-interval pacing between CRM-bound records."""

import time
from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")


class RequestPacer:
    """
    Sequential pacing policy for the CRM rate limit.
    Items come out in order with a fixed pause between successive items.
    The pause applies in dry-run as well, so previews take real-run time.
    """

    def __init__(self, interval_seconds: float, sleep: Callable[[float], None] = time.sleep):
        if interval_seconds < 0:
            raise ValueError("interval_seconds must be >= 0")
        self.interval_seconds = interval_seconds
        self._sleep = sleep

    def paced(self, items: Iterable[T]) -> Iterator[T]:
        """Yield items one at a time, pausing before every item after the first."""
        first = True
        for item in items:
            if not first and self.interval_seconds:
                self._sleep(self.interval_seconds)
            first = False
            yield item
