# src/taskpal/logging_setup.py

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

LOG_FILE_NAME = "taskpal.log"

# taskpal loggers whose INFO lines repeat what the chat reply already says
# (load/save counts, rejected input). Console shows them from WARNING up.
CHAT_ECHO_LOGGERS: tuple[str, ...] = (
    "taskpal.tasks",
    "taskpal.cli.bootstrap",
    "taskpal.core.chat",
)


class _ConsoleNoiseFilter(logging.Filter):
    """
    Decide which records reach the console next to the chat transcript.

    taskpal records pass at the handler level, except the chat-echo loggers
    which need WARNING. Everything else (captured warnings, libraries) needs ERROR.
    """

    def __init__(self, quiet: Iterable[str] = CHAT_ECHO_LOGGERS) -> None:
        super().__init__()
        self._quiet = tuple(quiet)

    def _is_quiet(self, name: str) -> bool:
        return any(name == q or name.startswith(q + ".") for q in self._quiet)

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name != "taskpal" and not name.startswith("taskpal."):
            return record.levelno >= logging.ERROR
        if self._is_quiet(name):
            return record.levelno >= logging.WARNING
        return True


def _console_handler(level: int) -> logging.Handler:
    # Chat lines carry their own timestamp.
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler.addFilter(_ConsoleNoiseFilter())
    return handler


def _file_handler(path: Path, level: int) -> logging.Handler:
    handler = logging.FileHandler(str(path), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return handler


def setup_logging(
    *,
    log_dir: str | Path = "data",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route taskpal logging to stderr (filtered) and to <log_dir>/taskpal.log (full).

    Replaces any handlers already on the root logger, so calling it twice
    does not duplicate output. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(_console_handler(console_level))
    root.addHandler(_file_handler(log_file, file_level))

    # warnings.warn(...) arrives as the "py.warnings" logger.
    logging.captureWarnings(True)
    return log_file
