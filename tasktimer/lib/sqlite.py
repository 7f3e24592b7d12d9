import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

Row = sqlite3.Row


def connect(db_path: Path) -> sqlite3.Connection:
    """Open the task database in autocommit mode with Row results.

    busy_timeout waits out another invocation holding the write lock.
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.isolation_level = None
    conn.execute("PRAGMA busy_timeout = 5000")
    logger.debug(f"Opened SQLite database {db_path}")
    return conn
