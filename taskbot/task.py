"""
Task data structures and their text record format

Provides the three task variants (todo, deadline, event), how each one is
rendered to the user, and how each one is written to and read back from a
single line of the task file.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Dict, List, Optional, Type

from taskbot.dates import format_datetime, parse_datetime, to_input_format
from taskbot.errors import CorruptRecordError, DateFormatError

FIELD_SEPARATOR = " | "
DONE_ICON = "✓"
NOT_DONE_ICON = "✗"

_UNESCAPE_RE = re.compile(r"\\(.)")


def escape_field(value: str) -> str:
    """Escape backslashes and pipes so a field never contains the separator."""
    return value.replace("\\", "\\\\").replace("|", "\\|")


def unescape_field(value: str) -> str:
    """Reverse escape_field()."""
    return _UNESCAPE_RE.sub(r"\1", value)


@dataclass
class Task:
    """Base class for every kind of task in the list."""

    name: str
    is_complete: bool = False

    type_marker: ClassVar[str] = ""

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Task name cannot be empty")

    def mark_complete(self) -> bool:
        """Mark the task as done. Returns False if it was already done."""
        if self.is_complete:
            return False
        self.is_complete = True
        return True

    @property
    def status_icon(self) -> str:
        return DONE_ICON if self.is_complete else NOT_DONE_ICON

    def __str__(self) -> str:
        return f"[{self.type_marker}][{self.status_icon}] {self.name}"

    def extra_fields(self) -> List[str]:
        """Variant-specific fields appended after the name in a record."""
        return []

    def to_record(self) -> str:
        """Convert to a single line for the task file."""
        fields = [self.type_marker, "1" if self.is_complete else "0", self.name]
        fields.extend(self.extra_fields())
        return FIELD_SEPARATOR.join(escape_field(f) for f in fields)


@dataclass
class TodoTask(Task):
    """A plain to-do with no date attached."""

    type_marker: ClassVar[str] = "T"


@dataclass
class DeadlineTask(Task):
    """A task that must be done by a given date and time."""

    by: str = ""
    due: datetime = field(init=False, repr=False, compare=False)

    type_marker: ClassVar[str] = "D"

    def __post_init__(self):
        super().__post_init__()
        # Raises DateFormatError for anything not in d/M/yyyy HHmm form
        self.due = parse_datetime(self.by)
        self.by = to_input_format(self.due)

    @property
    def due_text(self) -> str:
        return format_datetime(self.due)

    def __str__(self) -> str:
        return f"{super().__str__()} (by: {self.due_text})"

    def extra_fields(self) -> List[str]:
        return [self.by]


@dataclass
class EventTask(Task):
    """Something happening at a given time or place."""

    at: str = ""

    type_marker: ClassVar[str] = "E"

    def __str__(self) -> str:
        return f"{super().__str__()} (at: {self.at})"

    def extra_fields(self) -> List[str]:
        return [self.at]


TASK_TYPES: Dict[str, Type[Task]] = {
    TodoTask.type_marker: TodoTask,
    DeadlineTask.type_marker: DeadlineTask,
    EventTask.type_marker: EventTask,
}


def task_from_record(record: str, line_number: Optional[int] = None) -> Task:
    """
    Create a task from one line of the task file.

    Args:
        record: Line as written by Task.to_record()
        line_number: 1-based line number, used in the error message

    Returns:
        The restored task

    Raises:
        CorruptRecordError: If the line cannot be turned back into a task
    """
    fields = [unescape_field(f) for f in record.rstrip("\r\n").split(FIELD_SEPARATOR)]

    def corrupt(reason: str) -> CorruptRecordError:
        return CorruptRecordError(line_number, record.rstrip("\r\n"), reason)

    if len(fields) < 3:
        raise corrupt("too few fields")

    marker, flag = fields[0], fields[1]
    task_cls = TASK_TYPES.get(marker)
    if task_cls is None:
        raise corrupt(f"unknown task type {marker!r}")
    if flag not in ("0", "1"):
        raise corrupt(f"invalid completion flag {flag!r}")

    expected = 3 if task_cls is TodoTask else 4
    if len(fields) != expected:
        raise corrupt(f"expected {expected} fields, got {len(fields)}")

    kwargs = {"name": fields[2], "is_complete": flag == "1"}
    if task_cls is DeadlineTask:
        kwargs["by"] = fields[3]
    elif task_cls is EventTask:
        kwargs["at"] = fields[3]

    try:
        return task_cls(**kwargs)
    except DateFormatError as e:
        raise corrupt("unparseable deadline date") from e
    except ValueError as e:
        raise corrupt(str(e)) from e
