"""
Turns a raw input line into a Command
"""

import logging
from typing import Callable, Dict, List, Optional

from taskbot.commands import (
    AddCommand,
    ClearCommand,
    Command,
    ExitCommand,
    ListCommand,
    UpdateCommand,
)
from taskbot.errors import UnknownCommandError
from taskbot.notifier import Notifier

logger = logging.getLogger("taskbot.parser")

COMMANDS: Dict[str, Callable[[List[str]], Command]] = {
    "bye": ExitCommand,
    "clear": ClearCommand,
    "deadline": AddCommand,
    "delete": UpdateCommand,
    "done": UpdateCommand,
    "event": AddCommand,
    "find": ListCommand,
    "list": ListCommand,
    "reminders": ListCommand,
    "todo": AddCommand,
}


def tokenize(line: str) -> List[str]:
    """Split a line on single spaces, keeping empty tokens."""
    return line.rstrip("\r\n").split(" ")


def parse_command(line: str, notifier: Notifier) -> Optional[Command]:
    """
    Classify an input line by its first word.

    Parameters are not checked here; each command validates its own when
    executed.

    Args:
        line: Raw line typed by the user
        notifier: Where to report an unknown command

    Returns:
        The command to run, or None if the first word is not a known command
    """
    tokens = tokenize(line)
    factory = COMMANDS.get(tokens[0].lower())
    if factory is None:
        logger.debug(f"Unknown command: {line!r}")
        notifier.show_error(UnknownCommandError())
        return None
    return factory(tokens)
