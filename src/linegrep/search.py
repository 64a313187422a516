"""Run a search from a configuration: sources, output file, directory scan."""

from __future__ import annotations

import signal
import stat
import sys
import threading
from contextlib import contextmanager, nullcontext
from pathlib import Path
from types import FrameType
from typing import Iterator, TextIO

from loguru import logger

from .channel import Channel
from .config import SearchConfig
from .exceptions import LinegrepError, OutputExistsError, OutputFileError, SourceAccessError
from .matcher import LineMatcher
from .models import FileJob, MatchResult, SearchOutcome
from .pool import WorkerPool
from .renderer import FileRenderer
from .sink import OutputSink
from .walker import DirectoryWalker

# Exit codes returned by run()
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CANCELLED = 130


@contextmanager
def cancel_on_interrupt(cancel: threading.Event) -> Iterator[None]:
    """Turn Ctrl-C into cancellation for the duration of the block.

    A second Ctrl-C, once the event is already set, raises
    ``KeyboardInterrupt`` as usual. The previous handler is restored on
    exit. Outside the main thread this does nothing.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _handle(signum: int, frame: FrameType | None) -> None:
        if cancel.is_set():
            signal.default_int_handler(signum, frame)
        logger.warning("interrupted, stopping search (press Ctrl-C again to abort)")
        cancel.set()

    previous = signal.getsignal(signal.SIGINT)
    if previous is None:
        previous = signal.default_int_handler
    signal.signal(signal.SIGINT, _handle)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def build_renderer(config: SearchConfig) -> FileRenderer:
    """Create the renderer for a configuration."""
    return FileRenderer(LineMatcher(config.pattern, config.style, config.trim))


def search_directory(
    root: Path | str,
    config: SearchConfig,
    sink: OutputSink,
    cancel: threading.Event | None = None,
) -> SearchOutcome:
    """Search every text file below ``root`` concurrently.

    The walk runs on its own thread and feeds a job channel bounded to
    twice the worker count. Workers render on ``config.workers`` threads
    and hand non-empty blocks to the sink thread. Blocks from different
    files may be written in any order.

    Args:
        root: Directory to scan
        config: Pattern, trimming and worker count
        sink: Where rendered blocks are written
        cancel: Optional event; setting it stops the walk and the workers,
            and blocks still waiting for the sink are dropped

    Returns:
        ``SearchOutcome.CANCELLED`` if the cancel event was set, otherwise
        ``SearchOutcome.COMPLETED``.
    """
    cancel = cancel if cancel is not None else threading.Event()
    pool = WorkerPool(build_renderer(config), config.workers, cancel)
    capacity = pool.workers * 2

    jobs: Channel[FileJob] = Channel(capacity, cancel)
    results: Channel[MatchResult] = Channel(capacity, cancel)

    walker = DirectoryWalker(root, cancel)
    walk_thread = threading.Thread(
        target=walker.feed, args=(jobs,), name="linegrep-walker", daemon=True
    )

    logger.debug(f"Searching {root} with {pool.workers} workers")
    sink.start(results)
    walk_thread.start()

    pool.run(jobs, results)

    # Draining: no worker can produce anything from here on
    walk_thread.join()
    results.close()
    sink.wait()

    if cancel.is_set():
        logger.debug(f"Search of {root} cancelled")
        return SearchOutcome.CANCELLED
    return SearchOutcome.COMPLETED


def open_output(path: Path | str) -> TextIO:
    """Create the output file, refusing to touch an existing one.

    Raises:
        OutputExistsError: If anything already exists at ``path``
        OutputFileError: If the file cannot be created
    """
    path = Path(path)
    if path.exists():
        raise OutputExistsError(path)
    try:
        return open(path, "x", encoding="utf-8")
    except FileExistsError as e:
        raise OutputExistsError(path) from e
    except OSError as e:
        raise OutputFileError(path, "output file couldn't be created") from e


def read_source_file(path: Path) -> str:
    """Read a single source file.

    Invalid UTF-8 is replaced rather than rejected; only directory scans
    skip binary files.

    Raises:
        SourceAccessError: If the file cannot be read
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceAccessError(path, "can't open given file") from e
    return data.decode("utf-8", errors="replace")


def read_stdin(stdin: TextIO) -> str:
    """Read standard input to end of stream.

    Raises:
        SourceAccessError: If stdin cannot be read or decoded
    """
    try:
        return stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceAccessError("<stdin>", "invalid input") from e


def _search(
    config: SearchConfig,
    sink: OutputSink,
    cancel: threading.Event,
    stdin: TextIO,
    handle_interrupt: bool,
) -> int:
    if config.source:
        source = Path(config.source)
        try:
            info = source.stat()
        except OSError as e:
            raise SourceAccessError(source, "can't open given file or directory") from e

        if stat.S_ISDIR(info.st_mode):
            guard = cancel_on_interrupt(cancel) if handle_interrupt else nullcontext()
            with guard:
                outcome = search_directory(source.resolve(), config, sink, cancel)
            if outcome is SearchOutcome.CANCELLED:
                logger.warning(f"search of {source} cancelled")
                return EXIT_CANCELLED
            return EXIT_OK
        content = read_source_file(source)
    elif config.inline_text is not None:
        content = config.inline_text
    else:
        content = read_stdin(stdin)

    sink.emit(build_renderer(config).render(content))
    return EXIT_OK


def run(
    config: SearchConfig,
    cancel: threading.Event | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    handle_interrupt: bool = False,
) -> int:
    """Execute a search and return the process exit code.

    Args:
        config: What to search and how
        cancel: Optional event to stop a directory scan early
        stdin: Stream read when neither a file nor inline text is given
        stdout: Terminal stream for highlighted output
        handle_interrupt: Map Ctrl-C to ``cancel`` while a directory is
            scanned. Reading stdin or a single file stays interruptible.

    Returns:
        0 on success, including when nothing matched; 1 when the source or
        the output file cannot be used; 130 when a directory scan was
        cancelled.
    """
    stdin = stdin if stdin is not None else sys.stdin
    cancel = cancel if cancel is not None else threading.Event()

    output: TextIO | None = None
    try:
        if config.output_path:
            output = open_output(config.output_path)
        sink = OutputSink(config.style, output, stdout)
        return _search(config, sink, cancel, stdin, handle_interrupt)
    except LinegrepError as e:
        logger.error(str(e))
        return EXIT_FAILURE
    finally:
        if output is not None:
            output.close()
