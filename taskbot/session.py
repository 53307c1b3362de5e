"""
Interactive Taskbot session

Loads the task list, greets the user, then reads one line at a time, parsing
and executing each before reading the next, until the user says bye.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from taskbot.commands import CommandResult
from taskbot.config import Config
from taskbot.errors import PersistenceError, UnknownCommandError
from taskbot.notifier import Notifier
from taskbot.parser import parse_command
from taskbot.storage import TaskStorage
from taskbot.task_list import TaskList

logger = logging.getLogger("taskbot.session")


class Session:
    """One run of the assistant against one task file."""

    def __init__(
        self,
        storage: TaskStorage,
        notifier: Optional[Notifier] = None,
        config: Optional[Config] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.storage = storage
        self.notifier = notifier or Notifier()
        self.config = config or Config()
        self.clock = clock
        self.tasks: Optional[TaskList] = None
        self.finished = False

    def start(self) -> TaskList:
        """
        Load the task list and greet the user.

        Raises:
            PersistenceError: If the task file cannot be read. The failure is
                reported to the user before it is raised.
        """
        try:
            loaded = self.storage.load(self.notifier)
        except PersistenceError as e:
            logger.error(f"Could not load {self.storage.path}: {e}")
            self.notifier.show_error(e)
            raise

        self.tasks = TaskList(loaded, clock=self.clock, reminder_days=self.config.reminder_days)
        logger.info(f"Session started with {len(self.tasks)} tasks from {self.storage.path}")

        self.notifier.show_welcome()
        if self.config.show_reminders_on_start:
            self.tasks.show_reminders(self.notifier)
        else:
            self.tasks.init_deadlines()
        return self.tasks

    def handle(self, line: str) -> CommandResult:
        """Parse and execute a single input line."""
        if self.tasks is None:
            raise RuntimeError("Session.start() must be called before handle()")

        command = parse_command(line, self.notifier)
        if command is None:
            return CommandResult.CONTINUE

        result = command.execute(self.tasks, self.notifier, self.storage)
        if result is CommandResult.EXIT:
            self.finished = True
            logger.info("Session ended by user")
        return result

    def read_line(self) -> Optional[str]:
        """
        Read the next line from the console, or None at end of input.

        A line that is not valid text in the console's encoding is reported
        as an unknown command and the next line is read instead.
        """
        while True:
            try:
                return self.notifier.console.input(self.config.prompt)
            except EOFError:
                return None
            except UnicodeDecodeError as e:
                logger.warning(f"Discarded undecodable input line: {e}")
                self.notifier.show_error(UnknownCommandError())

    def run(self) -> None:
        """Start the session and process input until bye or end of input."""
        self.start()
        while not self.finished:
            line = self.read_line()
            if line is None:
                logger.info("End of input, session closed")
                break
            self.handle(line)
