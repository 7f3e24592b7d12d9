"""Task timer: track named tasks and the time spent on them."""

from tasktimer.models import Task, TaskStatus
from tasktimer.store import TaskStore, parse_task_id

__all__ = ["Task", "TaskStatus", "TaskStore", "parse_task_id"]
