"""
Commands parsed from one line of user input

Each command keeps the tokens of its input line and interprets its own
parameters when executed. Execution never raises a UserInputError; those are
reported to the user and the task list is left untouched.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from taskbot.errors import (
    EmptyDescriptionError,
    EmptySearchTermError,
    MissingDeadlineParamError,
    MissingEventParamError,
    MissingIndexError,
    UserInputError,
)
from taskbot.notifier import Notifier
from taskbot.storage import TaskStorage
from taskbot.task import DeadlineTask, EventTask, TodoTask
from taskbot.task_list import TaskList

logger = logging.getLogger("taskbot.commands")

DEADLINE_FLAG = "/by"
EVENT_FLAG = "/at"


class CommandResult(Enum):
    """What the session should do after a command has run."""

    CONTINUE = "continue"
    EXIT = "exit"


@dataclass
class Command:
    """Base class for commands."""

    tokens: List[str] = field(default_factory=list)

    @property
    def verb(self) -> str:
        return self.tokens[0].lower() if self.tokens else ""

    @property
    def arguments(self) -> List[str]:
        return self.tokens[1:]

    def execute(
        self, tasks: TaskList, notifier: Notifier, storage: TaskStorage
    ) -> CommandResult:
        """Run the command, reporting any input error to the user."""
        try:
            return self.run(tasks, notifier, storage) or CommandResult.CONTINUE
        except UserInputError as e:
            logger.info(f"Rejected {' '.join(self.tokens)!r}: {type(e).__name__}")
            notifier.show_error(e)
            return CommandResult.CONTINUE

    def run(self, tasks: TaskList, notifier: Notifier, storage: TaskStorage):
        raise NotImplementedError


def _split_on_flag(arguments: List[str], flag: str, missing_error: type):
    """Split arguments into (description, parameter) around a standalone flag."""
    if flag not in arguments:
        raise missing_error()
    position = arguments.index(flag)
    description = " ".join(arguments[:position])
    parameter = " ".join(arguments[position + 1:])
    if not description.strip():
        raise EmptyDescriptionError()
    if not parameter.strip():
        raise missing_error()
    return description, parameter


@dataclass
class AddCommand(Command):
    """todo / deadline / event"""

    def run(self, tasks, notifier, storage):
        arguments = self.arguments
        if not " ".join(arguments).strip():
            raise EmptyDescriptionError()

        if self.verb == "deadline":
            name, by = _split_on_flag(arguments, DEADLINE_FLAG, MissingDeadlineParamError)
            task = DeadlineTask(name, by=by)
        elif self.verb == "event":
            name, at = _split_on_flag(arguments, EVENT_FLAG, MissingEventParamError)
            task = EventTask(name, at=at)
        else:
            task = TodoTask(" ".join(arguments))

        tasks.add(task, notifier, storage)


@dataclass
class UpdateCommand(Command):
    """done / delete"""

    def run(self, tasks, notifier, storage):
        arguments = self.arguments
        if not arguments or not arguments[0]:
            raise MissingIndexError()

        if self.verb == "delete":
            tasks.delete(arguments[0], notifier, storage)
        else:
            tasks.complete(arguments[0], notifier, storage)


@dataclass
class ListCommand(Command):
    """list / find / reminders"""

    def run(self, tasks, notifier, storage):
        if self.verb == "find":
            term = " ".join(self.arguments)
            if not term.strip():
                raise EmptySearchTermError()
            tasks.find(term, notifier)
        elif self.verb == "reminders":
            tasks.show_reminders(notifier)
        else:
            tasks.show_list(notifier)


@dataclass
class ClearCommand(Command):
    def run(self, tasks, notifier, storage):
        tasks.clear(notifier, storage)


@dataclass
class ExitCommand(Command):
    def run(self, tasks, notifier, storage):
        notifier.show_farewell()
        return CommandResult.EXIT
