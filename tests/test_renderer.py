"""Tests for FileRenderer."""

import re

import pytest

from linegrep import FileRenderer, LineMatcher, Style
from linegrep.renderer import iter_lines
from linegrep.style import BLUE


def make_renderer(pattern: str, trim: bool = True, style: Style | None = None) -> FileRenderer:
    return FileRenderer(LineMatcher(re.compile(pattern), style or Style.plain(), trim))


class TestIterLines:
    """Tests for line splitting."""

    def test_counts_blank_lines(self):
        """Blank lines keep their numbers."""
        assert list(iter_lines("a\n\nb")) == [(1, "a"), (2, ""), (3, "b")]

    def test_trailing_newline(self):
        """A final newline does not add an empty line."""
        assert list(iter_lines("a\nb\n")) == [(1, "a"), (2, "b")]

    def test_empty_content(self):
        """Empty content has no lines."""
        assert list(iter_lines("")) == []

    def test_only_splits_on_newline(self):
        """Carriage returns and form feeds stay inside the line."""
        assert list(iter_lines("a\r\nb\x0cc")) == [(1, "a\r"), (2, "b\x0cc")]


class TestRender:
    """Tests for rendering a whole source."""

    @pytest.mark.parametrize(
        "content,empty",
        [
            ("hello world", True),
            ("this is a test", False),
            ("test test test", False),
            ("", True),
        ],
    )
    def test_empty_only_without_matches(self, content: str, empty: bool):
        """Output is empty exactly when nothing matched."""
        assert (make_renderer("test").render(content) == "") is empty

    def test_only_matching_lines(self):
        """Non-matching lines are omitted, numbers stay original."""
        renderer = make_renderer("test")

        block = renderer.render("test line 1\nno match here\nanother test\n")

        assert block == "1. test line 1\n3. another test\n"

    def test_header_prepended_once(self):
        """The header appears once, before the matched lines."""
        renderer = make_renderer("test")

        block = renderer.render("test\ntest", "file.txt: \n")

        assert block == "file.txt: \n1. test\n2. test\n"
        assert block.count("file.txt") == 1

    def test_header_never_alone(self):
        """No match means no header either."""
        renderer = make_renderer("xyz")

        assert renderer.render("hello\nworld\n", "file.txt: \n") == ""

    def test_no_trim_keeps_carriage_return(self):
        """Without trimming, trailing characters of the line are kept."""
        renderer = make_renderer("a", trim=False)

        assert renderer.render("  a \r\n") == "1.   a \r\n"

    def test_header_for_uses_style(self):
        """Directory headers carry the header marker."""
        renderer = make_renderer("a", style=Style())

        assert renderer.header_for("notes.txt") == f"{BLUE}notes.txt: \n"

    def test_scenario_directory_example(self):
        """const[a-z]{3} needs letters right after 'const'."""
        renderer = make_renderer("const[a-z]{3}")

        assert renderer.render("const test\nconst value") == ""
        assert renderer.render("const another") == ""
        assert renderer.render("constant") == "1. constant\n"
