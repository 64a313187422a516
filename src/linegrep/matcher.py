"""Per-line matching and highlighting."""

from __future__ import annotations

import re

from .models import Span
from .style import Style

# Characters removed from the edges of a line when trimming is enabled
LEADING_TRIM = "\t "
TRAILING_TRIM = "\t\n "


class LineMatcher:
    """Find all matches of a pattern in a line and render them highlighted.

    The compiled pattern is only ever read, so one matcher can be shared
    by any number of worker threads.

    Example:
        >>> matcher = LineMatcher(re.compile("test"), Style.plain())
        >>> matcher.render("  this is a test  ", 3)
        ('3. this is a test', 1)
    """

    def __init__(
        self,
        pattern: re.Pattern[str],
        style: Style | None = None,
        trim: bool = True,
    ) -> None:
        """Create a matcher.

        Args:
            pattern: Compiled regular expression
            style: Markers to write around line numbers and matches
            trim: Strip indentation before the first match and trailing
                whitespace after the last match
        """
        self._pattern = pattern
        self._style = style if style is not None else Style()
        self._trim = trim

    @property
    def pattern(self) -> re.Pattern[str]:
        """The compiled regular expression."""
        return self._pattern

    @property
    def style(self) -> Style:
        """Markers written around line numbers and matches."""
        return self._style

    @property
    def trim(self) -> bool:
        """Whether edge whitespace around matches is stripped."""
        return self._trim

    def spans(self, line: str) -> list[Span]:
        """Non-overlapping matches in ``line``, left to right."""
        return [Span(m.start(), m.end()) for m in self._pattern.finditer(line)]

    def render(self, line: str, line_number: int) -> tuple[str, int]:
        """Render one line with every match highlighted.

        Args:
            line: The line, without its newline
            line_number: 1-based number shown in the prefix

        Returns:
            Tuple of (rendered_line, match_count). When nothing matches the
            rendered line is empty and the caller must not emit anything
            for this line.
        """
        spans = self.spans(line)
        if not spans:
            return "", 0

        style = self._style
        parts = [style.line_number, f"{line_number}. ", style.text]

        cursor = 0
        for i, span in enumerate(spans):
            pre = line[cursor:span.start]
            # Only the edges are trimmed; text between two matches is kept as is
            if self._trim and i == 0:
                pre = pre.lstrip(LEADING_TRIM)
            parts.append(pre)
            parts.extend((style.match, line[span.start:span.end], style.text))
            cursor = span.end

        post = line[cursor:]
        if self._trim:
            post = post.rstrip(TRAILING_TRIM)
        parts.append(post)

        return "".join(parts), len(spans)
