"""Tests for configuration parsing."""

import re

import pytest

from linegrep import ConfigurationError, SearchConfig, configure
from linegrep.config import default_workers


class TestConfigure:
    """Tests for configure()."""

    def test_pattern_only(self):
        config = configure(["test"])

        assert config.pattern.pattern == "test"
        assert config.trim is True
        assert config.source is None
        assert config.output_path is None
        assert config.inline_text is None
        assert config.workers == default_workers()

    def test_inline_text(self):
        """Tokens after the pattern are joined with single spaces."""
        config = configure(["test", "this", "is", "a", "test"])

        assert config.args == ["test", "this", "is", "a", "test"]
        assert config.inline_text == "this is a test"

    def test_all_flags(self, tmp_path):
        output = tmp_path / "out.txt"

        config = configure(
            ["-f", "test.txt", "-o", str(output), "--no-trim", "--workers", "4", "test"]
        )

        assert config.trim is False
        assert config.workers == 4
        assert config.source == "test.txt"
        assert config.output_path == str(output)

    @pytest.mark.parametrize("value", ["0", "-2"])
    def test_workers_clamped(self, value: str):
        """Worker counts below 1 become 1."""
        config = configure(["--workers", value, "test"])

        assert config.workers == 1

    def test_no_arguments(self):
        with pytest.raises(ConfigurationError):
            configure([])

    def test_no_pattern_after_flags(self):
        with pytest.raises(ConfigurationError):
            configure(["-f", "file.txt"])

    def test_invalid_regex(self):
        with pytest.raises(ConfigurationError, match="invalid regular expression"):
            configure(["[invalid", "valid", "test.txt"])

    def test_invalid_flag_value(self):
        with pytest.raises(ConfigurationError):
            configure(["--workers", "invalid", "pattern"])

    def test_unknown_flag(self):
        with pytest.raises(ConfigurationError):
            configure(["--bogus", "pattern"])


class TestSearchConfig:
    """Tests for the configuration object."""

    def test_clamps_workers(self):
        assert SearchConfig(pattern=re.compile("a"), workers=0).workers == 1

    def test_single_token_has_no_inline_text(self):
        assert SearchConfig(pattern=re.compile("a"), args=["a"]).inline_text is None

    def test_empty_inline_token(self):
        """An explicitly empty text argument still counts as inline text."""
        assert SearchConfig(pattern=re.compile("a"), args=["a", ""]).inline_text == ""
