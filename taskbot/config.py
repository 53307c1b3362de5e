"""
Configuration management for Taskbot
"""

import yaml
from pathlib import Path
from typing import Any, Dict
from dataclasses import dataclass, asdict, fields

from taskbot.utils import get_taskbot_home, expand_path, print_warning


@dataclass
class Config:
    """Taskbot configuration."""

    # Where the task list is saved
    data_file: str = "~/.taskbot/tasks.txt"

    # Deadlines due within this many days show up as reminders
    reminder_days: int = 3

    # Show the reminders block right after the welcome message
    show_reminders_on_start: bool = True

    # Level for ~/.taskbot/logs/taskbot.log
    log_level: str = "INFO"

    # Input prompt for the interactive session
    prompt: str = "> "

    def get_data_path(self) -> Path:
        """Get the task file path with ~ and environment variables expanded."""
        return expand_path(self.data_file)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_taskbot_home() / "config.yaml"


def load_config() -> Config:
    """
    Load configuration from ~/.taskbot/config.yaml.
    Creates default config if it doesn't exist.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config()
        save_config(config)
        return config

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

        # Create config with values from file, using defaults for missing values
        return Config(
            data_file=data.get("data_file", Config.data_file),
            reminder_days=int(data.get("reminder_days", Config.reminder_days)),
            show_reminders_on_start=bool(
                data.get("show_reminders_on_start", Config.show_reminders_on_start)
            ),
            log_level=data.get("log_level", Config.log_level),
            prompt=data.get("prompt", Config.prompt),
        )

    except Exception as e:
        print_warning(f"Error loading config: {e}. Using defaults.")
        return Config()


def save_config(config: Config) -> None:
    """Save configuration to ~/.taskbot/config.yaml."""
    config_path = get_config_path()

    # Ensure parent directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


def coerce_value(key: str, value: str) -> Any:
    """
    Convert a string from the command line to the type of a config field.

    Raises:
        KeyError: If key is not a config field
        ValueError: If value cannot be converted
    """
    field_types = {f.name: f.type for f in fields(Config)}
    if key not in field_types:
        raise KeyError(key)

    field_type = field_types[key]
    if field_type in (bool, "bool"):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "on", "1"):
            return True
        if lowered in ("false", "no", "off", "0"):
            return False
        raise ValueError(f"Expected a boolean for {key}, got {value!r}")
    if field_type in (int, "int"):
        return int(value)
    return value


def update_config(**kwargs) -> Config:
    """
    Update configuration with new values.

    Args:
        **kwargs: Config fields to update

    Returns:
        Updated config

    Example:
        update_config(reminder_days=5)
    """
    config = load_config()

    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)

    save_config(config)
    return config
