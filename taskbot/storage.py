"""
Task file persistence

The task list is kept in a plain text file, one record per line (see
Task.to_record()). Every save rewrites the whole file.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from taskbot.errors import CorruptRecordError, PersistenceError
from taskbot.notifier import Notifier
from taskbot.task import Task, task_from_record

logger = logging.getLogger("taskbot.storage")


class TaskStorage:
    """Loads and saves the task list."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self, notifier: Optional[Notifier] = None) -> List[Task]:
        """
        Load all tasks from the task file.

        A missing file means an empty list. Records that cannot be parsed are
        reported through the notifier (if given) and skipped.

        Raises:
            PersistenceError: If the file exists but cannot be read
        """
        if not self.path.exists():
            logger.info(f"No task file at {self.path}, starting with an empty list")
            return []

        try:
            with open(self.path, "rb") as f:
                raw_lines = f.readlines()
        except OSError as e:
            logger.error(f"Failed to read {self.path}: {e}")
            raise PersistenceError() from e

        tasks = []
        for line_number, raw_line in enumerate(raw_lines, start=1):
            try:
                line = raw_line.decode("utf-8")
                if not line.strip():
                    continue
                tasks.append(task_from_record(line, line_number))
            except UnicodeDecodeError as e:
                self._skip(CorruptRecordError(
                    line_number, raw_line.decode("utf-8", "replace").rstrip("\r\n"), str(e)
                ), notifier)
            except CorruptRecordError as e:
                self._skip(e, notifier)

        logger.info(f"Loaded {len(tasks)} tasks from {self.path}")
        return tasks

    def _skip(self, error: CorruptRecordError, notifier: Optional[Notifier]) -> None:
        logger.warning(f"Skipping record in {self.path}: {error} ({error.reason})")
        if notifier is not None:
            notifier.show_error(error)

    def save(self, tasks: List[Task]) -> None:
        """
        Overwrite the task file with the given tasks.

        The records are written to a temporary file next to the task file,
        which then replaces it, so a failed save leaves the last good file.

        Raises:
            PersistenceError: If the file cannot be written
        """
        temp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                temp_path = f.name
                for task in tasks:
                    f.write(task.to_record() + "\n")
            os.replace(temp_path, self.path)
        except OSError as e:
            logger.error(f"Failed to save {len(tasks)} tasks to {self.path}: {e}")
            if temp_path is not None and os.path.exists(temp_path):
                os.remove(temp_path)
            raise PersistenceError() from e

        logger.debug(f"Saved {len(tasks)} tasks to {self.path}")
