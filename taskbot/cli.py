"""
Taskbot CLI - entry point and configuration commands
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from taskbot import __version__
from taskbot.config import load_config, update_config, coerce_value, get_config_path
from taskbot.errors import PersistenceError
from taskbot.notifier import Notifier
from taskbot.session import Session
from taskbot.storage import TaskStorage
from taskbot.utils import (
    expand_path,
    print_success,
    print_error,
    print_info,
    setup_logging,
)

console = Console()


def start_session(data_file: Optional[str] = None) -> None:
    """Load config, set up logging and run an interactive session."""
    config = load_config()
    setup_logging(config.log_level)

    path = expand_path(data_file) if data_file else config.get_data_path()
    session = Session(TaskStorage(path), Notifier(console), config)

    try:
        session.run()
    except PersistenceError:
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="Taskbot")
@click.pass_context
def cli(ctx):
    """
    Taskbot - a personal task-tracking assistant.

    Run without a command to start chatting. Inside the session, type
    todo, deadline, event, list, find, done, delete, reminders, clear or bye.
    """
    if ctx.invoked_subcommand is None:
        start_session()


@cli.command()
@click.option("--data-file", "-f", help="Task file to use (overrides config)")
def run(data_file: Optional[str]):
    """
    Start an interactive session.

    \b
    Examples:
        taskbot run
        taskbot run --data-file ~/work-tasks.txt
    """
    start_session(data_file)


@cli.group()
def config():
    """Show or change configuration."""
    pass


@config.command("show")
def config_show():
    """Show the current configuration."""
    cfg = load_config()

    table = Table(title=f"Taskbot config ({get_config_path()})")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in cfg.to_dict().items():
        table.add_row(key, repr(value))

    console.print(table)


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """
    Set a configuration value.

    \b
    Examples:
        taskbot config set reminder_days 5
        taskbot config set data_file ~/tasks.txt
    """
    try:
        coerced = coerce_value(key, value)
    except KeyError:
        print_error(f"Unknown config key '{key}'")
        sys.exit(1)
    except ValueError as e:
        print_error(f"Invalid value for '{key}': {e}")
        sys.exit(1)

    update_config(**{key: coerced})
    print_success(f"Set {key} = {coerced!r}")


def main():
    """Entry point for the CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        print_info("\n\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
