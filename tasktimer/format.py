"""Task formatting for CLI display."""

from datetime import datetime

from tasktimer.models import TIMESTAMP_FORMAT, Task


def format_duration(seconds: int | float) -> str:
    """Render elapsed seconds as HH:MM:SS. Hours are not wrapped at 24."""
    total = max(0, int(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_time(value: datetime | None) -> str:
    if value is None:
        return "N/A"
    return value.strftime(TIMESTAMP_FORMAT)


def task_duration(task: Task) -> str:
    seconds = task.duration_seconds()
    if seconds is not None:
        return format_duration(seconds)
    if task.start_time is not None:
        return "in progress"
    return "not started"


def format_task(task: Task) -> str:
    return (
        f"{task.id}: {task.name} [{task.status.value}]\n"
        f"   Duration: {task_duration(task)} "
        f"Start: {format_time(task.start_time)} End: {format_time(task.end_time)}"
    )


def format_task_list(tasks: list[Task]) -> str:
    """Format list of tasks for display.

    Two lines per task: header with id, name and status, then an indented
    line with duration and start/end timestamps.
    """
    if not tasks:
        return "No tasks"
    return "\n".join(format_task(task) for task in tasks)


def task_to_dict(task: Task) -> dict:
    return {
        "id": task.id,
        "name": task.name,
        "status": task.status.value,
        "start_time": format_time(task.start_time) if task.start_time else None,
        "end_time": format_time(task.end_time) if task.end_time else None,
        "duration": task_duration(task),
    }
