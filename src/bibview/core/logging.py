from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Marks handlers installed here so reconfiguring only replaces our own.
_HANDLER_MARKER = "_bibview_handler"


def _level_for(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int = 0, log_path: Path | None = None) -> None:
    """Send log records to stderr through rich, or to ``log_path`` when given.

    The full-screen browser owns the terminal, so it logs to a file instead.
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            root.removeHandler(existing)
            existing.close()

    handler: logging.Handler
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))

    setattr(handler, _HANDLER_MARKER, True)
    root.addHandler(handler)
    root.setLevel(_level_for(verbosity))
