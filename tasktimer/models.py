from dataclasses import dataclass
from datetime import datetime
from enum import Enum

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    STOPPED = "stopped"
    COMPLETED = "completed"

    @classmethod
    def from_db(cls, raw: str | None) -> "TaskStatus":
        if not raw:
            return cls.PENDING
        try:
            return cls(raw)
        except ValueError:
            return cls.PENDING


# Statuses each operation may be applied from. COMPLETED appears in none: terminal.
TRANSITIONS: dict[str, tuple[TaskStatus, ...]] = {
    "start": (TaskStatus.PENDING, TaskStatus.STOPPED),
    "stop": (TaskStatus.IN_PROGRESS,),
    "complete": (TaskStatus.IN_PROGRESS, TaskStatus.STOPPED),
}


@dataclass
class Task:
    id: int
    name: str
    status: TaskStatus = TaskStatus.PENDING
    start_time: datetime | None = None
    end_time: datetime | None = None

    def duration_seconds(self) -> int | None:
        """Elapsed whole seconds, or None unless both timestamps are set."""
        if self.start_time is None or self.end_time is None:
            return None
        return int((self.end_time - self.start_time).total_seconds())
