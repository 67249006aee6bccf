"""File logging for the hooks.

Hooks run with git's output attached to the user's terminal, so
diagnostics go to three files under the log directory instead:

- tag_debug.log: step-by-step trace of every run
- tag_history.log: versions and tags that were written
- tag_error.log: failures of the tag step

Files are not rotated by size. When a file holds more than
``max_entries`` lines at start-up it is truncated.
"""

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

LOGGING_DATETIME_FORMAT_STRING = "%Y-%m-%d %H:%M:%S"
DEBUG_FORMAT_STRING = "[DEBUG %(asctime)s] %(message)s"
HISTORY_FORMAT_STRING = "%(asctime)s - %(message)s"
ERROR_FORMAT_STRING = "[ERROR %(asctime)s] %(message)s"

DEBUG_LOG_NAME = "tag_debug.log"
HISTORY_LOG_NAME = "tag_history.log"
ERROR_LOG_NAME = "tag_error.log"

_instance_ids = itertools.count()


def count_entries(log_path: Path) -> int:
    """Count non-blank lines in a log file; a missing file has none."""
    if not log_path.exists():
        return 0
    with log_path.open(encoding="utf-8", errors="replace") as f:
        return sum(1 for line in f if line.strip())


def trim_log(log_path: Path, max_entries: int) -> int | None:
    """Truncate ``log_path`` if it holds more than ``max_entries`` entries.

    Returns:
        The number of entries removed, or None if the file was left alone
    """
    entries = count_entries(log_path)
    if entries > max_entries:
        log_path.write_text("", encoding="utf-8")
        return entries
    return None


class LogManager:
    """Writes debug, history and error entries to separate files."""

    def __init__(
        self,
        log_dir: Path,
        max_entries: int = 500,
        clear_debug_log: bool = False,
    ) -> None:
        self.log_dir = log_dir
        self.max_entries = max_entries
        self.debug_log = log_dir / DEBUG_LOG_NAME
        self.history_log = log_dir / HISTORY_LOG_NAME
        self.error_log = log_dir / ERROR_LOG_NAME

        self.log_dir.mkdir(parents=True, exist_ok=True)

        cleared = []
        if clear_debug_log:
            trim_log(self.debug_log, 0)
        for log_path in (self.history_log, self.error_log):
            removed = trim_log(log_path, max_entries)
            if removed is not None:
                cleared.append((log_path, removed))

        prefix = f"{__name__}.{next(_instance_ids)}"
        self._debug = self._make_logger(f"{prefix}.debug", self.debug_log, DEBUG_FORMAT_STRING)
        self._history = self._make_logger(
            f"{prefix}.history", self.history_log, HISTORY_FORMAT_STRING
        )
        self._error = self._make_logger(f"{prefix}.error", self.error_log, ERROR_FORMAT_STRING)

        for log_path, removed in cleared:
            self.debug(
                f"Cleared {log_path.name} ({removed} entries exceeded {max_entries} limit)"
            )

    @staticmethod
    def _make_logger(name: str, log_path: Path, fmt: str) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(fmt, datefmt=LOGGING_DATETIME_FORMAT_STRING))
        logger.addHandler(handler)
        return logger

    def debug(self, message: str) -> None:
        self._debug.debug(message)

    def history(self, message: str) -> None:
        self._history.info(message)

    def error(self, message: str) -> None:
        self._error.error(message)

    def close(self) -> None:
        """Flush and release the log files."""
        for logger in (self._debug, self._history, self._error):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)
