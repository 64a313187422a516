"""Command-line interface for linegrep."""

from __future__ import annotations

import os
import sys
import threading
from typing import NoReturn

from loguru import logger

from .config import configure
from .exceptions import ConfigurationError
from .search import run

LOG_FORMAT = "<level>{level}</level>: {message}"


def setup_logging() -> None:
    """Send log records to stderr; verbose when LINEGREP_DEBUG is set."""
    debug = os.environ.get("LINEGREP_DEBUG", "").lower() in ("1", "true", "yes")
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "WARNING", format=LOG_FORMAT)


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for CLI."""
    setup_logging()
    argv = sys.argv[1:] if argv is None else argv

    try:
        config = configure(argv)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(run(config, threading.Event(), handle_interrupt=True))


if __name__ == "__main__":
    main()
