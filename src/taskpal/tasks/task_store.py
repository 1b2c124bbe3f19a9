# src/taskpal/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from .task_codec import decode_task, encode_task
from .task_errors import CodecError, LoadCorruptedError, SaveFailedError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Flat-file task store.

    The file is the whole truth:
    - load() reads every record (no partial results on corruption)
    - save() rewrites the whole file, never appends

    The store keeps no tasks in memory between calls.
    """

    def __init__(self, path: str | Path = "data/tasks.txt") -> None:
        self._path = Path(path)
        logger.debug("TaskStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _ensure_dir(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

    # ---- public API ----

    def load(self) -> list[Task]:
        """
        Read all tasks from disk.

        Missing file -> empty list (first run).
        Any undecodable line -> LoadCorruptedError for the whole file.
        """
        try:
            self._ensure_dir()
            if not self._path.exists():
                logger.info("No task file at %s yet; starting empty.", self._path)
                return []
            lines = self._path.read_text("utf-8").split("\n")
        except (OSError, UnicodeDecodeError) as e:
            raise LoadCorruptedError(self._path, str(e)) from e

        tasks: list[Task] = []
        for line_no, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                tasks.append(decode_task(line))
            except CodecError as e:
                raise LoadCorruptedError(self._path, str(e), line_no=line_no) from e

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        """Overwrite the file with one record per task, in list order."""
        # Text mode translates "\n" into the platform line separator.
        payload = "".join(f"{encode_task(t)}\n" for t in tasks)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._ensure_dir()
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise SaveFailedError(self._path, str(e)) from e

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
