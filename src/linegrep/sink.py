"""Write rendered results to the terminal and the optional output file."""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from loguru import logger

from .channel import Channel
from .models import MatchResult
from .style import Style


class OutputSink:
    """Single consumer of completed renders.

    Text goes to ``stream`` unchanged and, when an output file is given,
    with all color markers removed to that file. Only the file is locked;
    the stream is written with one call per block.
    """

    def __init__(
        self,
        style: Style | None = None,
        output: TextIO | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Create a sink.

        Args:
            style: Markers to strip from the file copy
            output: Open text file for the color-stripped copy, or None
            stream: Terminal stream (defaults to ``sys.stdout`` at write time)
        """
        self._style = style if style is not None else Style()
        self._output = output
        self._stream = stream
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._stream_failed = False
        self.done = threading.Event()

    def emit(self, text: str) -> None:
        """Write one rendered block. Empty text writes nothing."""
        if not text:
            return

        if not self._stream_failed:
            stream = self._stream if self._stream is not None else sys.stdout
            try:
                stream.write(text)
            except OSError as e:
                # A closed pipe stays closed; keep draining for the output file
                self._stream_failed = True
                logger.warning(f"couldn't write to terminal: {e}")

        if self._output is None:
            return
        clean = self._style.strip(text)
        with self._lock:
            try:
                self._output.write(clean)
            except (OSError, ValueError) as e:
                logger.warning(f"couldn't write output: {e}")

    def consume(self, results: Channel[MatchResult]) -> None:
        """Emit every matching result until ``results`` is closed.

        Write failures never stop the loop, so producers blocked on a full
        channel always make progress.
        """
        try:
            for result in results:
                if result.has_match:
                    self.emit(result.text)
        finally:
            self.done.set()

    def start(self, results: Channel[MatchResult]) -> threading.Thread:
        """Run :meth:`consume` on a dedicated thread."""
        self.done.clear()
        self._thread = threading.Thread(
            target=self.consume,
            args=(results,),
            name="linegrep-sink",
            daemon=True,
        )
        self._thread.start()
        return self._thread

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the consumer has seen the end of the results."""
        finished = self.done.wait(timeout)
        if finished and self._thread is not None:
            self._thread.join()
        return finished
