"""Bounded, closable queue shared by the pipeline threads."""

from __future__ import annotations

import threading
from queue import Empty, Full, Queue
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

# How often blocked producers and consumers look at the cancel event
POLL_INTERVAL = 0.05


class _Closed:
    """Marker placed on the queue by :meth:`Channel.close`."""

    def __repr__(self) -> str:
        return "<closed>"


_CLOSED = _Closed()


class Channel(Generic[T]):
    """FIFO queue with close semantics, on top of :class:`queue.Queue`.

    Any number of threads may put and iterate. Iteration ends when the
    channel has been closed and drained, or, for a channel built with a
    cancel event, as soon as cancellation is observed. Blocking operations
    poll the cancel event so no thread stays parked on a queue nobody will
    ever touch again.

    Example:
        >>> jobs: Channel[int] = Channel(maxsize=4)
        >>> jobs.put(1)
        True
        >>> jobs.close()
        >>> list(jobs)
        [1]
    """

    def __init__(self, maxsize: int = 0, cancel: threading.Event | None = None) -> None:
        """Create a channel.

        Args:
            maxsize: Capacity; producers block while it is reached (0 = unbounded)
            cancel: Optional event that stops producers and consumers
        """
        self._queue: Queue[T | _Closed] = Queue(maxsize)
        self._cancel = cancel

    @property
    def maxsize(self) -> int:
        """Capacity of the channel (0 means unbounded)."""
        return self._queue.maxsize

    def cancelled(self) -> bool:
        """True once the cancel event given at construction is set."""
        return self._cancel is not None and self._cancel.is_set()

    def put(self, item: T) -> bool:
        """Enqueue ``item``, waiting for room.

        Returns:
            False if the channel was cancelled before the item fit; the
            item is dropped in that case.
        """
        return self._put(item)

    def close(self) -> None:
        """Signal consumers that no more items will arrive."""
        self._put(_CLOSED)

    def _put(self, item: T | _Closed) -> bool:
        if self._cancel is None:
            self._queue.put(item)
            return True

        while not self._cancel.is_set():
            try:
                self._queue.put(item, timeout=POLL_INTERVAL)
                return True
            except Full:
                continue
        return False

    def __iter__(self) -> Iterator[T]:
        while True:
            if self.cancelled():
                return
            try:
                item = self._queue.get(timeout=POLL_INTERVAL)
            except Empty:
                continue

            if isinstance(item, _Closed):
                # Hand the marker on to the next consumer
                self._queue.put(item)
                return
            if self.cancelled():
                return
            yield item
