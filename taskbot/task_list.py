"""
The live task list and its reminder set

TaskList owns the ordered list of tasks shown to the user (1-based display
index = position + 1), applies every mutation, renders listings, and keeps
the set of incomplete deadlines that fall due within the reminder window.
"""

import logging
import re
from datetime import datetime
from typing import Callable, Iterable, Iterator, List, Optional

from dateutil.relativedelta import relativedelta

from taskbot.errors import (
    EmptySearchTermError,
    IndexOutOfBoundsError,
    InvalidIndexError,
    PersistenceError,
)
from taskbot.notifier import Notifier
from taskbot.storage import TaskStorage
from taskbot.task import DeadlineTask, Task

logger = logging.getLogger("taskbot.task_list")

REMINDER_WINDOW_DAYS = 3

LIST_HEADER = "Here are the tasks in your list:"
FIND_HEADER = "Here are the matching tasks in your list:"
REMINDERS_HEADER = "===============REMINDERS================"
REMINDERS_FOOTER = "======================================="
REMINDERS_INTRO = "You have some approaching deadlines:"
NO_REMINDERS = "You have no approaching deadlines. Great! :-)"
ALREADY_DONE = "This task has already been marked as done!"
CLEARED = "Noted. I've removed all tasks from your list."

INDEX_RE = re.compile(r"^[+-]?[0-9]+$")


def _count_line(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


class TaskList:
    """Ordered collection of tasks plus the derived reminder set."""

    def __init__(
        self,
        tasks: Optional[Iterable[Task]] = None,
        clock: Callable[[], datetime] = datetime.now,
        reminder_days: int = REMINDER_WINDOW_DAYS,
    ):
        self._tasks: List[Task] = list(tasks or [])
        self._reminders: List[DeadlineTask] = []
        self.clock = clock
        self.reminder_days = reminder_days

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> List[Task]:
        """A copy of the tasks in display order."""
        return list(self._tasks)

    @property
    def reminders(self) -> List[DeadlineTask]:
        """A copy of the reminder set as of the last recompute."""
        return list(self._reminders)

    # -------------------- helpers --------------------

    def _position(self, index_text: str) -> int:
        """Turn a 1-based index typed by the user into a list position."""
        if not INDEX_RE.match(index_text or ""):
            raise InvalidIndexError()
        index = int(index_text)
        if index < 1 or index > len(self._tasks):
            raise IndexOutOfBoundsError()
        return index - 1

    def _save(self, notifier: Notifier, storage: TaskStorage) -> None:
        # A failed save leaves the in-memory list as it is
        try:
            storage.save(self._tasks)
        except PersistenceError as e:
            logger.error(f"Task list not saved, memory and disk may differ: {e}")
            notifier.show_error(e)

    def _render(self, header: str, tasks: Iterable[tuple]) -> str:
        lines = [header]
        lines.extend(f"{index}.{task}" for index, task in tasks)
        return "\n".join(lines)

    def _is_reminder(self, task: Task) -> bool:
        return any(reminder is task for reminder in self._reminders)

    # -------------------- mutations --------------------

    def add(self, task: Task, notifier: Notifier, storage: TaskStorage) -> None:
        """Append a task, confirm it to the user, and save."""
        self._tasks.append(task)
        logger.info(f"Added task #{len(self._tasks)}: {task.to_record()}")
        notifier.show(
            f"Got it. I've added this task:\n  {task}\n{_count_line(len(self._tasks))}"
        )
        self._save(notifier, storage)

    def delete(self, index_text: str, notifier: Notifier, storage: TaskStorage) -> Task:
        """
        Remove the task at a 1-based index.

        Raises:
            InvalidIndexError: If the index is not a number
            IndexOutOfBoundsError: If no task has that index
        """
        position = self._position(index_text)
        task = self._tasks.pop(position)
        if self._is_reminder(task):
            self._reminders = [r for r in self._reminders if r is not task]
        logger.info(f"Deleted task #{position + 1}: {task.to_record()}")
        notifier.show(
            f"Noted. I've removed this task:\n  {task}\n{_count_line(len(self._tasks))}"
        )
        self._save(notifier, storage)
        return task

    def complete(self, index_text: str, notifier: Notifier, storage: TaskStorage) -> Task:
        """
        Mark the task at a 1-based index as done.

        Completing a task that is already done only tells the user so; the
        list is not saved again.

        Raises:
            InvalidIndexError: If the index is not a number
            IndexOutOfBoundsError: If no task has that index
        """
        position = self._position(index_text)
        task = self._tasks[position]

        if not task.mark_complete():
            notifier.show(ALREADY_DONE)
            return task

        if self._is_reminder(task):
            self.init_deadlines()

        logger.info(f"Completed task #{position + 1}: {task.to_record()}")
        notifier.show(f"Nice! I've marked this task as done:\n  {task}")
        self._save(notifier, storage)
        return task

    def clear(self, notifier: Notifier, storage: TaskStorage) -> None:
        """Remove every task and reminder, then save the empty list."""
        removed = len(self._tasks)
        self._tasks.clear()
        self._reminders.clear()
        logger.info(f"Cleared {removed} tasks")
        notifier.show(f"{CLEARED}\n{_count_line(0)}")
        self._save(notifier, storage)

    # -------------------- reminders --------------------

    def is_due_soon(self, task: DeadlineTask, now: datetime) -> bool:
        """True if the deadline falls 1 to reminder_days calendar days after now."""
        difference = relativedelta(task.due.date(), now.date())
        return (
            difference.years == 0
            and difference.months == 0
            and 0 < difference.days <= self.reminder_days
        )

    def init_deadlines(self, now: Optional[datetime] = None) -> List[DeadlineTask]:
        """
        Rebuild the reminder set from a full scan of the task list.

        Args:
            now: Reference time (defaults to the list's clock)

        Returns:
            The new reminder set
        """
        now = now or self.clock()
        self._reminders = [
            task
            for task in self._tasks
            if isinstance(task, DeadlineTask)
            and not task.is_complete
            and self.is_due_soon(task, now)
        ]
        logger.debug(f"{len(self._reminders)} deadlines due within {self.reminder_days} days")
        return self.reminders

    # -------------------- rendering --------------------

    def render_list(self) -> str:
        return self._render(LIST_HEADER, enumerate(self._tasks, start=1))

    def render_matches(self, term: str) -> str:
        """Render tasks whose name contains term, keeping their list indices."""
        matches = (
            (index, task)
            for index, task in enumerate(self._tasks, start=1)
            if term in task.name
        )
        return self._render(FIND_HEADER, matches)

    def render_reminders(self) -> str:
        lines = [REMINDERS_HEADER]
        if self._reminders:
            lines.append(REMINDERS_INTRO)
            lines.extend(
                f"{index}.{task}" for index, task in enumerate(self._reminders, start=1)
            )
        else:
            lines.append(NO_REMINDERS)
        lines.append(REMINDERS_FOOTER)
        return "\n".join(lines)

    def show_list(self, notifier: Notifier) -> None:
        notifier.show(self.render_list())

    def find(self, term: str, notifier: Notifier) -> None:
        """
        Show tasks whose name contains term (case-sensitive).

        Raises:
            EmptySearchTermError: If term is empty
        """
        if not term:
            raise EmptySearchTermError()
        notifier.show(self.render_matches(term))

    def show_reminders(self, notifier: Notifier) -> None:
        """Recompute the reminder set and show it."""
        self.init_deadlines()
        notifier.show_raw(self.render_reminders())
