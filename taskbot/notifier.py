"""
User-facing output for Taskbot

The Notifier is the only place the core writes to the user. Framed messages
are printed inside a rich Panel; raw messages are printed as they are.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from taskbot.errors import TaskbotError

logger = logging.getLogger("taskbot.notifier")

LOGO = (
    " _____         _    _           _   \n"
    "|_   _|_ _ ___| | _| |__   ___ | |_ \n"
    "  | |/ _` / __| |/ / '_ \\ / _ \\| __|\n"
    "  | | (_| \\__ \\   <| |_) | (_) | |_ \n"
    "  |_|\\__,_|___/_|\\_\\_.__/ \\___/ \\__|\n"
)

WELCOME_MESSAGE = "Hello! I'm Taskbot\nWhat can I do for you?"
EXIT_MESSAGE = "Bye. Hope to see you again soon!"


class Notifier:
    """Sends formatted and raw text, and error reports, to a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show(self, text: str) -> None:
        """Print text framed in a panel."""
        self.console.print(Panel(Text(text), border_style="blue", expand=False))

    def show_raw(self, text: str) -> None:
        """Print text without any framing."""
        self.console.print(Text(text))

    def show_error(self, error: TaskbotError) -> None:
        """Report an error to the user using its message."""
        logger.debug(f"Reporting {type(error).__name__}: {error}")
        self.console.print(Panel(Text(str(error)), border_style="red", expand=False))

    def show_welcome(self) -> None:
        self.show_raw(LOGO)
        self.show(WELCOME_MESSAGE)

    def show_farewell(self) -> None:
        self.show(EXIT_MESSAGE)
