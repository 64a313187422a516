"""Fixed-size pool of threads rendering file jobs."""

from __future__ import annotations

import stat
import threading
from pathlib import Path

from loguru import logger

from .channel import Channel
from .models import FileJob, MatchResult
from .renderer import FileRenderer


def read_text(path: Path) -> str | None:
    """Read a file as strict UTF-8 text.

    Returns:
        The decoded content, or None if the path is not a regular file,
        cannot be read or is not valid UTF-8 (binary files end up here).
    """
    try:
        if not stat.S_ISREG(path.stat().st_mode):
            logger.debug(f"Skipping non-regular file {path}")
            return None
        data = path.read_bytes()
    except OSError as e:
        logger.debug(f"Skipping unreadable file {path}: {e}")
        return None

    try:
        return data.decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        logger.debug(f"Skipping non-UTF-8 file {path}")
        return None


class WorkerPool:
    """Render jobs from a shared channel on ``workers`` threads.

    Every job is taken by exactly one worker. Jobs whose files cannot be
    read, are not UTF-8 or contain no match produce no result at all.
    """

    def __init__(
        self,
        renderer: FileRenderer,
        workers: int = 1,
        cancel: threading.Event | None = None,
    ) -> None:
        self._renderer = renderer
        self._workers = max(1, workers)
        self._cancel = cancel if cancel is not None else threading.Event()

    @property
    def workers(self) -> int:
        """Number of worker threads, at least 1."""
        return self._workers

    def render_job(self, job: FileJob) -> MatchResult | None:
        """Render a single job, or return None if it yields nothing."""
        content = read_text(job.path)
        if content is None:
            return None

        text = self._renderer.render(content, self._renderer.header_for(job.name))
        if not text:
            return None
        return MatchResult(source=job.name, text=text, has_match=True)

    def _work(self, jobs: Channel[FileJob], results: Channel[MatchResult]) -> None:
        for job in jobs:
            if self._cancel.is_set():
                return
            result = self.render_job(job)
            if result is not None:
                results.put(result)

    def run(self, jobs: Channel[FileJob], results: Channel[MatchResult]) -> None:
        """Start the workers and block until all of them have exited.

        Workers stop when ``jobs`` is closed and drained, or between two
        jobs once the cancel event is set.
        """
        threads = [
            threading.Thread(
                target=self._work,
                args=(jobs, results),
                name=f"linegrep-worker-{i}",
                daemon=True,
            )
            for i in range(self._workers)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        logger.debug(f"All {self._workers} workers finished")
