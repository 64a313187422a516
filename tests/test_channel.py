"""Tests for Channel."""

import threading
import time

from linegrep import Channel


class TestChannel:
    """Tests for close and cancel semantics."""

    def test_iterates_until_closed(self):
        """Items come out in FIFO order, then iteration stops."""
        channel: Channel[int] = Channel()
        for i in range(5):
            channel.put(i)
        channel.close()

        assert list(channel) == [0, 1, 2, 3, 4]

    def test_close_reaches_every_consumer(self):
        """All consumers stop after a single close()."""
        channel: Channel[int] = Channel(maxsize=4)
        seen: list[int] = []
        lock = threading.Lock()

        def consume() -> None:
            for item in channel:
                with lock:
                    seen.append(item)

        threads = [threading.Thread(target=consume) for _ in range(3)]
        for t in threads:
            t.start()
        for i in range(20):
            channel.put(i)
        channel.close()
        for t in threads:
            t.join(timeout=5)

        assert not any(t.is_alive() for t in threads)
        assert sorted(seen) == list(range(20))

    def test_put_gives_up_when_cancelled(self):
        """A producer blocked on a full channel returns False on cancel."""
        cancel = threading.Event()
        channel: Channel[int] = Channel(maxsize=1, cancel=cancel)
        assert channel.put(1)

        result: list[bool] = []
        producer = threading.Thread(target=lambda: result.append(channel.put(2)))
        producer.start()
        time.sleep(0.1)
        cancel.set()
        producer.join(timeout=5)

        assert not producer.is_alive()
        assert result == [False]

    def test_iteration_stops_on_cancel(self):
        """Consumers of a cancelled channel stop without a close()."""
        cancel = threading.Event()
        channel: Channel[int] = Channel(maxsize=10, cancel=cancel)
        channel.put(1)
        cancel.set()

        assert list(channel) == []

    def test_cancelled_before_start(self):
        """Nothing can be put into an already cancelled channel."""
        cancel = threading.Event()
        cancel.set()
        channel: Channel[int] = Channel(maxsize=1, cancel=cancel)

        assert channel.put(1) is False
        assert channel.cancelled()
