"""Logging configuration for the terminal UI: a log file plus the Textual devtools console."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

LOG_FILE_NAME = "taskdeck.log"


class _DevtoolsNoiseFilter(logging.Filter):
    """
    Keep the devtools console readable:
    - taskdeck logs at INFO+
    - third-party libraries (urllib3, asyncio, ...) only at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "taskdeck" or record.name.startswith("taskdeck."):
            return record.levelno >= logging.INFO
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskdeck",
    level: int | str = logging.INFO,
) -> Path:
    """
    Configure logging with:
    - File handler: full logs for debugging
    - Textual handler: filtered records to the devtools console

    There is no stderr handler; it would draw over the terminal UI.
    Call this ONCE, before the app starts. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    th = TextualHandler()
    th.setFormatter(fmt)
    th.addFilter(_DevtoolsNoiseFilter())
    root.addHandler(th)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    return log_file
