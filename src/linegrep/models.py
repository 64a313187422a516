"""Data models for linegrep."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Span:
    """One regex match inside a single line.

    Attributes:
        start: Offset of the first matched character
        end: Offset one past the last matched character
    """

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class FileJob:
    """A file waiting to be rendered by a worker.

    Attributes:
        path: Path of the file, as produced by the directory walk
        name: Base name, used for the block header
    """

    path: Path
    name: str


@dataclass(frozen=True)
class MatchResult:
    """Rendered output for one source.

    Attributes:
        source: Name of the source the text was rendered from
        text: Rendered block, color markers included
        has_match: False when the source had no matching line
    """

    source: str
    text: str
    has_match: bool


class SearchOutcome(Enum):
    """How a directory search ended."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"
