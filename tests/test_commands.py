"""
Tests for command execution
"""

import pytest
from datetime import datetime
from unittest.mock import MagicMock

from taskbot.commands import (
    AddCommand,
    ClearCommand,
    CommandResult,
    ExitCommand,
    ListCommand,
    UpdateCommand,
)
from taskbot.errors import (
    DateFormatError,
    EmptyDescriptionError,
    EmptySearchTermError,
    IndexOutOfBoundsError,
    InvalidIndexError,
    MissingDeadlineParamError,
    MissingEventParamError,
    MissingIndexError,
)
from taskbot.task import DeadlineTask, EventTask, TodoTask
from taskbot.task_list import TaskList


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def storage():
    return MagicMock()


@pytest.fixture
def tasks():
    return TaskList(clock=lambda: datetime(2024, 1, 1, 9, 0))


def run(command_cls, line, tasks, notifier, storage):
    return command_cls(line.split(" ")).execute(tasks, notifier, storage)


def reported(notifier):
    """The error passed to the most recent show_error call."""
    return notifier.show_error.call_args.args[0]


class TestAddCommand:
    """Test todo, deadline and event."""

    def test_add_todo(self, tasks, notifier, storage):
        result = run(AddCommand, "todo read book", tasks, notifier, storage)

        assert result is CommandResult.CONTINUE
        assert tasks.tasks == [TodoTask("read book")]
        storage.save.assert_called_once()

    def test_add_deadline(self, tasks, notifier, storage):
        run(AddCommand, "deadline return book /by 2/12/2019 1800", tasks, notifier, storage)

        task = tasks.tasks[0]
        assert isinstance(task, DeadlineTask)
        assert task.name == "return book"
        assert task.by == "2/12/2019 1800"
        assert "2nd of December 2019, 6:00PM" in notifier.show.call_args.args[0]

    def test_add_event(self, tasks, notifier, storage):
        run(AddCommand, "event project meeting /at Mon 2-4pm", tasks, notifier, storage)

        assert tasks.tasks == [EventTask("project meeting", at="Mon 2-4pm")]

    @pytest.mark.parametrize("line", ["todo", "todo ", "todo   ", "deadline", "event "])
    def test_empty_description(self, tasks, notifier, storage, line):
        run(AddCommand, line, tasks, notifier, storage)

        assert len(tasks) == 0
        assert isinstance(reported(notifier), EmptyDescriptionError)
        storage.save.assert_not_called()

    def test_flag_without_description(self, tasks, notifier, storage):
        run(AddCommand, "deadline /by 2/12/2019 1800", tasks, notifier, storage)

        assert len(tasks) == 0
        assert isinstance(reported(notifier), EmptyDescriptionError)

    def test_deadline_missing_flag(self, tasks, notifier, storage):
        run(AddCommand, "deadline return book 2/12/2019 1800", tasks, notifier, storage)

        assert len(tasks) == 0
        assert isinstance(reported(notifier), MissingDeadlineParamError)

    def test_flag_must_be_standalone(self, tasks, notifier, storage):
        run(AddCommand, "deadline return book /by2/12/2019 1800", tasks, notifier, storage)

        assert isinstance(reported(notifier), MissingDeadlineParamError)

    def test_deadline_flag_without_date(self, tasks, notifier, storage):
        run(AddCommand, "deadline return book /by", tasks, notifier, storage)

        assert isinstance(reported(notifier), MissingDeadlineParamError)

    def test_event_missing_flag(self, tasks, notifier, storage):
        run(AddCommand, "event meeting /by Mon", tasks, notifier, storage)

        assert len(tasks) == 0
        assert isinstance(reported(notifier), MissingEventParamError)

    def test_deadline_invalid_date(self, tasks, notifier, storage):
        run(AddCommand, "deadline return book /by next friday", tasks, notifier, storage)

        assert len(tasks) == 0
        assert isinstance(reported(notifier), DateFormatError)
        storage.save.assert_not_called()


class TestUpdateCommand:
    """Test done and delete."""

    @pytest.fixture
    def tasks(self):
        return TaskList([TodoTask("a"), TodoTask("b"), TodoTask("c")])

    def test_done(self, tasks, notifier, storage):
        run(UpdateCommand, "done 2", tasks, notifier, storage)

        assert [t.is_complete for t in tasks] == [False, True, False]

    def test_delete(self, tasks, notifier, storage):
        run(UpdateCommand, "delete 1", tasks, notifier, storage)

        assert [t.name for t in tasks] == ["b", "c"]

    @pytest.mark.parametrize("line", ["done", "delete", "done "])
    def test_missing_index(self, tasks, notifier, storage, line):
        run(UpdateCommand, line, tasks, notifier, storage)

        assert isinstance(reported(notifier), MissingIndexError)
        assert len(tasks) == 3

    def test_invalid_index(self, tasks, notifier, storage):
        run(UpdateCommand, "delete first", tasks, notifier, storage)

        assert isinstance(reported(notifier), InvalidIndexError)
        assert len(tasks) == 3

    def test_out_of_bounds(self, tasks, notifier, storage):
        run(UpdateCommand, "done 4", tasks, notifier, storage)

        assert isinstance(reported(notifier), IndexOutOfBoundsError)
        assert not any(t.is_complete for t in tasks)
        storage.save.assert_not_called()


class TestListCommand:
    """Test list, find and reminders."""

    def test_list(self, notifier, storage):
        tasks = TaskList([TodoTask("a")])

        run(ListCommand, "list", tasks, notifier, storage)

        assert notifier.show.call_args.args[0].endswith("1.[T][✗] a")
        storage.save.assert_not_called()

    def test_find_joins_terms(self, notifier, storage):
        tasks = TaskList([TodoTask("read a book"), TodoTask("read")])

        run(ListCommand, "find read a", tasks, notifier, storage)

        assert notifier.show.call_args.args[0].split("\n")[1:] == ["1.[T][✗] read a book"]

    @pytest.mark.parametrize("line", ["find", "find ", "find  "])
    def test_find_empty_term(self, notifier, storage, line):
        run(ListCommand, line, TaskList([TodoTask("a")]), notifier, storage)

        assert isinstance(reported(notifier), EmptySearchTermError)
        notifier.show.assert_not_called()

    def test_reminders(self, notifier, storage):
        deadline = DeadlineTask("essay", by="2/1/2024 1200")
        tasks = TaskList([deadline], clock=lambda: datetime(2024, 1, 1, 9, 0))

        run(ListCommand, "reminders", tasks, notifier, storage)

        assert tasks.reminders == [deadline]
        assert "essay" in notifier.show_raw.call_args.args[0]


class TestClearAndExit:
    """Test clear and bye."""

    def test_clear(self, notifier, storage):
        tasks = TaskList([TodoTask("a"), TodoTask("b")])

        result = run(ClearCommand, "clear", tasks, notifier, storage)

        assert result is CommandResult.CONTINUE
        assert len(tasks) == 0
        storage.save.assert_called_once_with([])

    def test_exit(self, tasks, notifier, storage):
        result = run(ExitCommand, "bye", tasks, notifier, storage)

        assert result is CommandResult.EXIT
        notifier.show_farewell.assert_called_once()
        storage.save.assert_not_called()
