"""Custom exceptions for linegrep."""

from pathlib import Path


class LinegrepError(Exception):
    """Base class for errors that abort a search before or during setup.

    Per-file problems found while scanning a directory (unreadable files,
    binary content, bad directory entries) never raise; they are skipped.
    """


class ConfigurationError(LinegrepError):
    """Raised when the command line cannot be turned into a search.

    This covers a missing pattern, a pattern that is not a valid regular
    expression and flag values of the wrong type.
    """


class SourceAccessError(LinegrepError):
    """The search source could not be opened or read.

    Attributes:
        path: The file or directory that failed, or ``"<stdin>"``
        reason: Short human-readable cause
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")


# ─────────────────────────────────────────────────────────────────────
# Output File Exceptions
# ─────────────────────────────────────────────────────────────────────


class OutputFileError(LinegrepError):
    """The output file could not be created.

    Attributes:
        path: Requested output path
        reason: Short human-readable cause
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")


class OutputExistsError(OutputFileError):
    """The output path already exists.

    The existing file is never opened for writing, so its content is left
    untouched.
    """

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, "output file already exists")


class SearchCancelledError(Exception):
    """Raised inside the pipeline when the cancel event has been set.

    Deliberately not a ``LinegrepError``: cancellation is an outcome the
    caller asked for, not a fault.
    """
