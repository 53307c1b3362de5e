"""
Utility functions for Taskbot
"""

import logging
import os
from pathlib import Path
from typing import Optional

from rich.console import Console

console = Console()

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_taskbot_home() -> Path:
    """
    Get the Taskbot home directory (~/.taskbot).
    Creates it if it doesn't exist.
    """
    taskbot_home = Path.home() / ".taskbot"
    taskbot_home.mkdir(exist_ok=True)
    return taskbot_home


def get_log_path() -> Path:
    """Get the path to the session log file."""
    log_dir = get_taskbot_home() / "logs"
    log_dir.mkdir(exist_ok=True)
    return log_dir / "taskbot.log"


def setup_logging(level: str = "INFO", log_path: Optional[Path] = None) -> logging.Logger:
    """
    Attach a file handler to the "taskbot" logger.

    Calling this more than once replaces the previously attached handler
    instead of stacking a second one.
    """
    logger = logging.getLogger("taskbot")
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for handler in list(logger.handlers):
        if getattr(handler, "_taskbot_handler", False):
            logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(log_path or get_log_path())
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler._taskbot_handler = True
    logger.addHandler(file_handler)
    return logger


def expand_path(path: str) -> Path:
    """
    Expand a path with ~ and environment variables.
    """
    expanded = os.path.expanduser(os.path.expandvars(path))
    return Path(expanded).resolve()


def print_success(message: str):
    """Print a success message with formatting."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str):
    """Print an error message with formatting."""
    console.print(f"[red]✗[/red] {message}", style="bold red")


def print_warning(message: str):
    """Print a warning message with formatting."""
    console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")


def print_info(message: str):
    """Print an info message with formatting."""
    console.print(f"[blue]ℹ[/blue] {message}")
