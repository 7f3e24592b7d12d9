import sqlite3

from tasktimer.lib.sqlite import connect


def test_connect_returns_autocommit_row_connection(tmp_path):
    conn = connect(tmp_path / "tasks.db")
    try:
        assert conn.row_factory is sqlite3.Row
        assert conn.isolation_level is None
        assert conn.execute("PRAGMA busy_timeout").fetchone()[0] == 5000

        conn.execute("CREATE TABLE t (x INTEGER)")
        conn.execute("INSERT INTO t VALUES (1)")
    finally:
        conn.close()

    other = sqlite3.connect(tmp_path / "tasks.db")
    try:
        assert other.execute("SELECT x FROM t").fetchall() == [(1,)]
    finally:
        other.close()
