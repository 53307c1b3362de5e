"""
Exception hierarchy for Taskbot.

Every exception carries its user-facing text as the default message, so a
caller can report any of them with ``str(error)``.
"""

from typing import Optional


class TaskbotError(Exception):
    """Base class for all Taskbot errors."""

    message = "Something went wrong."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


# User input errors: always reported, never mutate state, never fatal.


class UserInputError(TaskbotError):
    """The user typed something that cannot be carried out."""


class UnknownCommandError(UserInputError):
    message = "☹ OOPS!!! I'm sorry, but I don't know what that means :-("


class MissingIndexError(UserInputError):
    message = "☹ OOPS!!! The index of the task is missing."


class InvalidIndexError(UserInputError):
    message = "☹ OOPS!!! Please only enter numeric values for the task index."


class IndexOutOfBoundsError(UserInputError):
    message = "☹ OOPS!!! Please enter a valid task index value."


class EmptyDescriptionError(UserInputError):
    message = "☹ OOPS!!! The description of a task cannot be empty."


class EmptySearchTermError(UserInputError):
    message = "☹ OOPS!!! The search term is missing."


class MissingDeadlineParamError(UserInputError):
    message = '☹ OOPS!!! The deadline for the task must be specified with "/by".'


class MissingEventParamError(UserInputError):
    message = '☹ OOPS!!! The event parameter must be specified with "/at".'


class DateFormatError(UserInputError):
    message = (
        '☹ OOPS!!! Please input the deadline in the following format: '
        '"dd/mm/yyyy hhmm".'
    )


# Persistence errors


class PersistenceError(TaskbotError):
    """Loading or saving the task file failed."""

    message = "☹ OOPS!!! Failed to open file! Is the path correct?"


class CorruptRecordError(TaskbotError):
    """A saved task record could not be turned back into a task."""

    message = "An error occurred when trying to re-create a task from the saved file!"

    def __init__(self, line_number: Optional[int] = None, record: str = "", reason: str = ""):
        self.line_number = line_number
        self.record = record
        self.reason = reason
        text = self.message
        if line_number is not None:
            text = f"{text} (line {line_number}: {record!r})"
        super().__init__(text)
