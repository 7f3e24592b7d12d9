import os
from pathlib import Path

HOME_ENV = "TASKTIMER_HOME"
DB_ENV = "TASKTIMER_DB"


def data_dir() -> Path:
    override = os.environ.get(HOME_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".tasktimer"


def config_file() -> Path:
    return data_dir() / "config.yaml"


def default_db() -> Path:
    return data_dir() / "tasks.db"
