"""Recursive directory traversal producing file jobs."""

from __future__ import annotations

import os
import stat
import threading
from pathlib import Path
from typing import Iterator

from loguru import logger

from .channel import Channel
from .exceptions import SearchCancelledError
from .models import FileJob, SearchOutcome


def is_candidate(path: Path) -> bool:
    """True for regular files and for links whose target cannot be resolved.

    FIFOs, sockets and device nodes are never searched; opening a FIFO
    blocks until a writer shows up. Broken links are kept so the worker
    skips them like any other unreadable file.
    """
    try:
        return stat.S_ISREG(path.stat().st_mode)
    except OSError:
        return path.is_symlink()


class DirectoryWalker:
    """Enumerate every regular file below a root directory.

    Paths are built relative to the root passed in; the process working
    directory is never changed. Entries that cannot be listed are skipped
    and the walk carries on.

    Example:
        >>> walker = DirectoryWalker("/srv/logs", threading.Event())
        >>> for job in walker:
        ...     print(job.name)
    """

    def __init__(self, root: Path | str, cancel: threading.Event | None = None) -> None:
        """Create a walker.

        Args:
            root: Directory to scan recursively
            cancel: Checked before every entry; when set the walk stops
        """
        self._root = Path(root)
        self._cancel = cancel if cancel is not None else threading.Event()

    @property
    def root(self) -> Path:
        """Directory the walk starts from."""
        return self._root

    def _skip(self, error: OSError) -> None:
        logger.debug(f"Skipping unreadable path {error.filename}: {error.strerror}")

    def _check_cancelled(self) -> None:
        if self._cancel.is_set():
            raise SearchCancelledError(f"walk of {self._root} cancelled")

    def __iter__(self) -> Iterator[FileJob]:
        """Yield one job per file, in traversal order.

        Raises:
            SearchCancelledError: If the cancel event is set during the walk
        """
        for dirpath, _dirnames, filenames in os.walk(self._root, onerror=self._skip):
            self._check_cancelled()
            base = Path(dirpath)
            for name in filenames:
                self._check_cancelled()
                path = base / name
                if not is_candidate(path):
                    logger.debug(f"Skipping non-regular file {path}")
                    continue
                yield FileJob(path=path, name=name)

    def feed(self, jobs: Channel[FileJob]) -> SearchOutcome:
        """Push every job into ``jobs`` and close it.

        The channel is closed on every exit path so consumers never wait
        on a producer that is gone.
        """
        try:
            for job in self:
                if not jobs.put(job):
                    return SearchOutcome.CANCELLED
            return SearchOutcome.COMPLETED
        except SearchCancelledError:
            logger.debug(f"Directory walk of {self._root} cancelled")
            return SearchOutcome.CANCELLED
        finally:
            jobs.close()
