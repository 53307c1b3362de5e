"""
Date parsing and human-readable formatting for deadlines.

Input dates use the pattern ``d/M/yyyy HHmm`` (e.g. ``2/12/2019 1800``) and are
rendered as ``2nd of December 2019, 6:00PM``.
"""

import calendar
import re
from datetime import datetime
from typing import Dict

from taskbot.errors import DateFormatError

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

INPUT_PATTERN = re.compile(r"^([0-9]{1,2})/([0-9]{1,2})/([0-9]{4}) ([0-9]{2})([0-9]{2})$")


def _build_ordinal_suffixes() -> Dict[int, str]:
    suffixes = {1: "st", 2: "nd", 3: "rd", 21: "st", 22: "nd", 23: "rd", 31: "st"}
    for day in range(1, 32):
        suffixes.setdefault(day, "th")
    return suffixes


ORDINAL_SUFFIXES = _build_ordinal_suffixes()


def ordinal(day: int) -> str:
    """Return the day of month with its suffix, e.g. ``2`` -> ``"2nd"``."""
    return f"{day}{ORDINAL_SUFFIXES[day]}"


def parse_datetime(text: str) -> datetime:
    """
    Parse a ``d/M/yyyy HHmm`` string into a datetime.

    A day of month that exceeds the month's length (29-31) is moved back to
    the last day of that month, e.g. ``31/2/2019`` becomes 28 February.

    Raises:
        DateFormatError: If the text does not match the input pattern.
    """
    match = INPUT_PATTERN.match(text.strip()) if text else None
    if not match:
        raise DateFormatError()

    day, month, year, hour, minute = (int(group) for group in match.groups())
    if not 1 <= month <= 12 or not 1 <= day <= 31 or hour > 23 or minute > 59:
        raise DateFormatError()

    if day > 28:
        day = min(day, calendar.monthrange(year, month)[1])

    try:
        return datetime(year, month, day, hour, minute)
    except ValueError as e:
        raise DateFormatError() from e


def format_datetime(value: datetime) -> str:
    """Render a datetime as ``<day><suffix> of <Month> <Year>, <h>:<mm><AM|PM>``."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return (
        f"{ordinal(value.day)} of {MONTH_NAMES[value.month - 1]} {value.year}, "
        f"{hour}:{value.minute:02d}{meridiem}"
    )


def to_input_format(value: datetime) -> str:
    """Render a datetime back into the ``d/M/yyyy HHmm`` input pattern."""
    return f"{value.day}/{value.month}/{value.year} {value.hour:02d}{value.minute:02d}"
