"""Task store: one SQLite table of timed tasks."""

import logging
import re
import sqlite3
from collections.abc import Callable, Sequence
from datetime import date, datetime
from pathlib import Path
from typing import Any

from tasktimer.errors import InvalidTransitionError, NotFoundError, StorageError, ValidationError
from tasktimer.lib.sqlite import Row, connect
from tasktimer.models import TIMESTAMP_FORMAT, TRANSITIONS, Task, TaskStatus

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"[0-9]+")

# Largest value an SQLite INTEGER column can hold.
MAX_TASK_ID = 2**63 - 1

_SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    start_time DATETIME,
    end_time DATETIME,
    status TEXT NOT NULL DEFAULT 'pending'
)
"""

_COLUMNS = "id, name, start_time, end_time, status"


def parse_task_id(raw: str | int) -> int:
    """Parse a task id from CLI text. Only plain positive decimals are accepted."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    else:
        text = str(raw).strip()
        if not _ID_PATTERN.fullmatch(text) or len(text) > len(str(MAX_TASK_ID)):
            raise ValidationError(f"Invalid task id: {raw!r}")
        value = int(text)
    if value < 1 or value > MAX_TASK_ID:
        raise ValidationError(f"Invalid task id: {raw!r}")
    return value


def _parse_status(raw: str | TaskStatus) -> TaskStatus:
    try:
        return TaskStatus(raw)
    except ValueError as e:
        choices = ", ".join(s.value for s in TaskStatus)
        raise ValidationError(f"Unknown status '{raw}' (expected one of: {choices})") from e


def _parse_date(raw: str | date) -> str:
    if isinstance(raw, date):
        return raw.isoformat()
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date().isoformat()
    except ValueError as e:
        raise ValidationError(f"Invalid date '{raw}' (expected YYYY-MM-DD)") from e


def _to_db_time(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def _from_db_time(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _row_to_task(row: Row) -> Task:
    return Task(
        id=int(row["id"]),
        name=row["name"],
        status=TaskStatus.from_db(row["status"]),
        start_time=_from_db_time(row["start_time"]),
        end_time=_from_db_time(row["end_time"]),
    )


class TaskStore:
    """Durable keeper of task rows.

    Owns a single connection for its lifetime. Every public method is one
    statement against the ``tasks`` table; there is no in-memory cache.
    """

    def __init__(self, db_path: str | Path, clock: Callable[[], datetime] = datetime.now):
        self.db_path = Path(db_path)
        self._clock = clock
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn: sqlite3.Connection | None = connect(self.db_path)
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Cannot open database {self.db_path}: {e}") from e
        self.create_table()
        logger.debug(f"TaskStore ready db={self.db_path} total={self.count_tasks()}")

    def __enter__(self) -> "TaskStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _now(self) -> datetime:
        return self._clock().replace(microsecond=0)

    def _execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        if self._conn is None:
            raise StorageError("TaskStore is closed")
        try:
            return self._conn.execute(sql, params)
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {e}") from e

    def create_table(self) -> None:
        self._execute(_SCHEMA)

    def count_tasks(self) -> int:
        (n,) = self._execute("SELECT COUNT(*) FROM tasks").fetchone()
        return int(n)

    def add_task(self, name: str) -> int:
        if not name or not name.strip():
            raise ValidationError("Task name is required")

        cur = self._execute(
            "INSERT INTO tasks (name, status) VALUES (?, ?)",
            (name.strip(), TaskStatus.PENDING.value),
        )
        task_id = cur.lastrowid
        if task_id is None:
            raise StorageError("SQLite did not return lastrowid for tasks insert")
        logger.debug(f"Task added id={task_id} name={name.strip()!r}")
        return int(task_id)

    def get_task(self, task_id: int) -> Task | None:
        row = self._execute(
            f"SELECT {_COLUMNS} FROM tasks WHERE id = ?", (parse_task_id(task_id),)
        ).fetchone()
        return _row_to_task(row) if row else None

    def list_tasks(
        self,
        status: str | TaskStatus | None = None,
        on_date: str | date | None = None,
    ) -> list[Task]:
        """Tasks matching every supplied filter, oldest id first.

        ``on_date`` matches the calendar day of ``start_time``, so tasks never
        started are excluded whenever a date is given.
        """
        query = f"SELECT {_COLUMNS} FROM tasks WHERE 1=1"
        params: list[Any] = []

        if status:
            query += " AND status = ?"
            params.append(_parse_status(status).value)

        if on_date:
            query += " AND DATE(start_time) = ?"
            params.append(_parse_date(on_date))

        query += " ORDER BY id"

        rows = self._execute(query, params).fetchall()
        return [_row_to_task(row) for row in rows]

    def _transition(self, task_id: int, op: str, assignments: str, values: Sequence[Any]) -> Task:
        task_id = parse_task_id(task_id)
        allowed = [s.value for s in TRANSITIONS[op]]
        placeholders = ", ".join("?" for _ in allowed)
        cur = self._execute(
            f"UPDATE tasks SET {assignments} WHERE id = ? AND status IN ({placeholders})",
            (*values, task_id, *allowed),
        )
        if cur.rowcount == 0:
            task = self.get_task(task_id)
            if task is None:
                raise NotFoundError(f"Task {task_id} not found")
            raise InvalidTransitionError(
                f"Cannot {op} task {task_id}: status is {task.status.value}"
            )

        task = self.get_task(task_id)
        if task is None:
            raise NotFoundError(f"Task {task_id} not found")
        logger.debug(f"Task {op} id={task_id} status={task.status.value}")
        return task

    def start_task(self, task_id: int) -> Task:
        """Begin timing, or restart it on a stopped task.

        Restarting overwrites start_time with now and clears end_time, so the
        reported duration covers only the latest run.
        """
        return self._transition(
            task_id,
            "start",
            "start_time = ?, end_time = NULL, status = ?",
            (_to_db_time(self._now()), TaskStatus.IN_PROGRESS.value),
        )

    def stop_task(self, task_id: int) -> Task:
        return self._transition(
            task_id,
            "stop",
            "end_time = ?, status = ?",
            (_to_db_time(self._now()), TaskStatus.STOPPED.value),
        )

    def complete_task(self, task_id: int) -> Task:
        """Finish a task. A stopped task keeps the time it was stopped at."""
        return self._transition(
            task_id,
            "complete",
            "end_time = COALESCE(end_time, ?), status = ?",
            (_to_db_time(self._now()), TaskStatus.COMPLETED.value),
        )

    def delete_task(self, task_id: int) -> None:
        task_id = parse_task_id(task_id)
        cur = self._execute("DELETE FROM tasks WHERE id = ?", (task_id,))
        if cur.rowcount == 0:
            raise NotFoundError(f"Task {task_id} not found")
        logger.debug(f"Task deleted id={task_id}")
