"""In-band color markers used when rendering matches."""

from __future__ import annotations

from dataclasses import dataclass

# ANSI SGR foreground colors
RED = "\x1b[31m"
GREEN = "\x1b[32m"
BLUE = "\x1b[34m"
WHITE = "\x1b[37m"


@dataclass(frozen=True)
class Style:
    """The four markers written into rendered text.

    Markers are plain strings embedded in the output, not structured
    fields. Anything that needs uncolored text (the output file) removes
    them again with :meth:`strip`.

    Attributes:
        line_number: Written before the ``"<n>. "`` prefix
        text: Written after the prefix and after every match
        match: Written before every matched substring
        header: Written before a file header in directory scans
    """

    line_number: str = RED
    text: str = WHITE
    match: str = GREEN
    header: str = BLUE

    @classmethod
    def plain(cls) -> "Style":
        """A style with no markers at all."""
        return cls(line_number="", text="", match="", header="")

    @property
    def markers(self) -> tuple[str, ...]:
        """All four markers, in the order they are stripped."""
        return (self.match, self.line_number, self.header, self.text)

    def strip(self, text: str) -> str:
        """Remove every occurrence of each marker from ``text``."""
        for marker in self.markers:
            if marker:
                text = text.replace(marker, "")
        return text
