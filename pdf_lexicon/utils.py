"""Utility helpers for PDF Lexicon."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging", "time_block"]


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Route package logging through rich; ``verbose`` enables debug output."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@contextmanager
def time_block(logger: logging.Logger, message: str) -> Iterator[None]:
    """Context manager that logs the execution time of a code block."""
    start = datetime.now(tz=timezone.utc)
    logger.debug("Starting %s", message)
    try:
        yield
    finally:
        elapsed = datetime.now(tz=timezone.utc) - start
        logger.debug("Finished %s in %.3fs", message, elapsed.total_seconds())
