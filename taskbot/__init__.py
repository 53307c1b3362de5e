"""
Taskbot - a personal task-tracking assistant driven by line-based commands.
"""

__version__ = "0.1.0"
__author__ = "Taskbot Team"

from taskbot.task import Task, TodoTask, DeadlineTask, EventTask
from taskbot.task_list import TaskList

__all__ = ["Task", "TodoTask", "DeadlineTask", "EventTask", "TaskList", "__version__"]
