from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO

_LEVEL_TAGS = {
    logging.DEBUG: ("DEBUG", "\033[0;36m"),
    logging.INFO: ("INFO", "\033[0;32m"),
    logging.WARNING: ("WARN", "\033[1;33m"),
    logging.ERROR: ("ERROR", "\033[0;31m"),
    logging.CRITICAL: ("ERROR", "\033[0;31m"),
}
_RESET = "\033[0m"


class ConsoleFormatter(logging.Formatter):
    """`[INFO] message` lines, with the tag colored when writing to a TTY."""

    def __init__(self, *, color: bool) -> None:
        super().__init__(fmt="%(message)s")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        tag, color = _LEVEL_TAGS.get(record.levelno, (record.levelname, ""))
        msg = super().format(record)
        if self.color and color:
            return f"{color}[{tag}]{_RESET} {msg}"
        return f"[{tag}] {msg}"


def _stream_is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.INFO,
    also_console: bool = True,
) -> Optional[str]:
    """Configure logging.

    Console output is the primary channel: every decision and error is shown
    to the invoking user. A log file is only written when `log_path` is set;
    if it cannot be opened we keep going with the console alone.

    Returns the file path being used, or None for console-only logging.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_nvim_installer_configured", False):
        return getattr(logger, "_nvim_installer_log_path", None)

    handlers: list[logging.Handler] = []
    chosen_path: Optional[str] = None
    file_error: Optional[OSError] = None

    if log_path:
        fmt = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
        try:
            Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
            file_handler.setFormatter(fmt)
            handlers.append(file_handler)
            chosen_path = log_path
        except OSError as e:
            file_error = e

    if also_console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ConsoleFormatter(color=_stream_is_tty(sys.stderr)))
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_nvim_installer_configured", True)
    setattr(logger, "_nvim_installer_log_path", chosen_path)

    if file_error is not None:
        logging.getLogger(__name__).warning(
            "Cannot write log file %s (%s); logging to console only", log_path, file_error
        )
    elif chosen_path:
        logging.getLogger(__name__).debug("Logging to %s", chosen_path)
    return chosen_path
