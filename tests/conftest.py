from datetime import datetime, timedelta

import pytest

from tasktimer import config
from tasktimer.lib import paths
from tasktimer.store import TaskStore


class FakeClock:
    """Deterministic clock: returns ``now`` until advanced."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 3, 15, 9, 0, 0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> datetime:
        self.now += timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def timer_home(monkeypatch, tmp_path):
    """Isolated data directory per test.

    Points TASKTIMER_HOME at tmp_path so no test touches ~/.tasktimer, and
    clears the cached config before and after.
    """
    home = tmp_path / "home"
    monkeypatch.setenv(paths.HOME_ENV, str(home))
    monkeypatch.delenv(paths.DB_ENV, raising=False)
    config.load_config.cache_clear()
    yield home
    config.load_config.cache_clear()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(timer_home, clock):
    with TaskStore(timer_home / "tasks.db", clock=clock) as s:
        yield s
