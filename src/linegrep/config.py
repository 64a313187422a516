"""Search configuration and command-line parsing."""

from __future__ import annotations

import argparse
import os
import re
from dataclasses import dataclass, field
from typing import NoReturn

from .exceptions import ConfigurationError
from .style import Style


def default_workers() -> int:
    """Number of workers used when ``--workers`` is not given."""
    return os.cpu_count() or 1


@dataclass
class SearchConfig:
    """Everything a search run needs.

    Attributes:
        pattern: Compiled regular expression, shared read-only by workers
        trim: Strip indentation and trailing whitespace around matches
        source: File or directory to search instead of inline text or stdin
        output_path: Where to save color-stripped matches
        args: Positional tokens, the pattern first
        workers: Worker threads for directory scans (at least 1)
        style: Markers used for highlighting
    """

    pattern: re.Pattern[str]
    trim: bool = True
    source: str | None = None
    output_path: str | None = None
    args: list[str] = field(default_factory=list)
    workers: int = field(default_factory=default_workers)
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        if self.workers < 1:
            self.workers = 1

    @property
    def inline_text(self) -> str | None:
        """Text given after the pattern, or None if there was none."""
        if len(self.args) < 2:
            return None
        return " ".join(self.args[1:])


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises instead of exiting the process."""

    def error(self, message: str) -> NoReturn:
        raise ConfigurationError(message)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = _ArgumentParser(
        prog="linegrep",
        description="Search text, a file or a directory tree for a regular expression",
    )
    parser.add_argument("pattern", help="Regular expression to search for")
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to search, joined with spaces (stdin is read when omitted)",
    )
    parser.add_argument(
        "--no-trim",
        action="store_true",
        help="Keep leading indentation and trailing whitespace around matches",
    )
    parser.add_argument(
        "-f", "--file", dest="source", help="Search this file or directory"
    )
    parser.add_argument(
        "-o", "--output", dest="output_path", help="Save the matches to a new file"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=default_workers(),
        help="Concurrent workers for directory search (default: CPU count)",
    )
    return parser


def configure(argv: list[str]) -> SearchConfig:
    """Build a :class:`SearchConfig` from command-line arguments.

    Args:
        argv: Arguments without the program name

    Raises:
        ConfigurationError: Missing pattern, bad flag value or invalid regex
    """
    if not argv:
        raise ConfigurationError("linegrep needs a pattern to match")

    args = create_parser().parse_args(argv)

    try:
        pattern = re.compile(args.pattern)
    except re.error as e:
        raise ConfigurationError(f"invalid regular expression: {e}") from e

    return SearchConfig(
        pattern=pattern,
        trim=not args.no_trim,
        source=args.source,
        output_path=args.output_path,
        args=[args.pattern, *args.text],
        workers=args.workers,
    )
