from datetime import datetime

from tasktimer.models import TRANSITIONS, Task, TaskStatus


def test_status_values_match_cli_labels():
    assert [s.value for s in TaskStatus] == ["pending", "in-progress", "stopped", "completed"]


def test_status_from_db_falls_back_to_pending():
    assert TaskStatus.from_db("stopped") is TaskStatus.STOPPED
    assert TaskStatus.from_db(None) is TaskStatus.PENDING
    assert TaskStatus.from_db("archived") is TaskStatus.PENDING


def test_completed_is_terminal():
    for allowed in TRANSITIONS.values():
        assert TaskStatus.COMPLETED not in allowed


def test_duration_requires_both_timestamps():
    start = datetime(2024, 1, 1, 10, 0, 0)
    assert Task(id=1, name="x").duration_seconds() is None
    assert Task(id=1, name="x", start_time=start).duration_seconds() is None

    task = Task(id=1, name="x", start_time=start, end_time=datetime(2024, 1, 1, 11, 2, 5))
    assert task.duration_seconds() == 3725
