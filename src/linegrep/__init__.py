"""linegrep: highlight regular expression matches in text, files and directory trees.

Example:
    >>> import re
    >>> from linegrep import FileRenderer, LineMatcher, Style
    >>> renderer = FileRenderer(LineMatcher(re.compile("test"), Style.plain()))
    >>> renderer.render("hello\\n  a test here\\n")
    '2. a test here\\n'
    >>>
    >>> # Concurrent directory scan
    >>> from linegrep import OutputSink, SearchConfig, search_directory
    >>> config = SearchConfig(pattern=re.compile("TODO"), workers=4)
    >>> search_directory("src", config, OutputSink(config.style))
    <SearchOutcome.COMPLETED: 'completed'>
"""

from .channel import Channel
from .config import SearchConfig, configure
from .exceptions import (
    ConfigurationError,
    LinegrepError,
    OutputExistsError,
    OutputFileError,
    SearchCancelledError,
    SourceAccessError,
)
from .matcher import LineMatcher
from .models import FileJob, MatchResult, SearchOutcome, Span
from .pool import WorkerPool
from .renderer import FileRenderer
from .search import run, search_directory
from .sink import OutputSink
from .style import Style
from .walker import DirectoryWalker

__version__ = "0.1.0"
__all__ = [
    # Rendering
    "LineMatcher",
    "FileRenderer",
    "Style",
    "Span",
    # Directory search
    "DirectoryWalker",
    "WorkerPool",
    "OutputSink",
    "Channel",
    "FileJob",
    "MatchResult",
    "SearchOutcome",
    "search_directory",
    # Configuration
    "SearchConfig",
    "configure",
    "run",
    # Exceptions
    "LinegrepError",
    "ConfigurationError",
    "SourceAccessError",
    "OutputFileError",
    "OutputExistsError",
    "SearchCancelledError",
]
