"""Render the matching lines of a whole source into one block."""

from __future__ import annotations

from typing import Iterator

from .matcher import LineMatcher


def iter_lines(content: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs, 1-based, newlines removed.

    Lines are split on ``"\\n"`` only. A trailing newline does not start
    another line, so empty content yields nothing.
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    yield from enumerate(lines, start=1)


class FileRenderer:
    """Apply a :class:`LineMatcher` to every line of a source."""

    def __init__(self, matcher: LineMatcher) -> None:
        self._matcher = matcher

    @property
    def matcher(self) -> LineMatcher:
        """The matcher applied to every line."""
        return self._matcher

    def header_for(self, name: str) -> str:
        """Header written above the block of a file found in a directory scan."""
        return f"{self._matcher.style.header}{name}: \n"

    def render(self, content: str, header: str = "") -> str:
        """Render every matching line of ``content``.

        Args:
            content: Full text of the source
            header: Prepended once when at least one line matched

        Returns:
            The rendered block, or ``""`` if no line matched. The header is
            never returned on its own.
        """
        rendered: list[str] = []
        total = 0

        for line_number, line in iter_lines(content):
            text, count = self._matcher.render(line, line_number)
            if count == 0:
                continue
            total += count
            rendered.append(text)
            rendered.append("\n")

        if total == 0:
            return ""
        return header + "".join(rendered)
