"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``), creating the schema on application start
(``init_db``) and a cursor context manager.  It uses SQLite as a
lightweight embedded database; to switch to another DBMS you would
replace the connection logic and adapt the SQL accordingly.

The ``UNIQUE`` constraint on ``employees.email`` backs the uniqueness
check done by the service layer, so two concurrent creates with the
same email cannot both be stored.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings

# Bounds of an SQLite INTEGER column; larger Python ints cannot be bound.
SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1

SCHEMA = """
CREATE TABLE IF NOT EXISTS employees (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL,
    email TEXT NOT NULL UNIQUE
);
"""


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the package root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # employee_api/
    return str((base_dir / db_url).resolve())


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    ``db_path`` defaults to the configured database.  Rows are returned
    as ``sqlite3.Row`` so columns can be accessed by name.
    """
    conn = sqlite3.connect(db_path or get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed when the block exits normally and
    rolled back when it raises.
    """
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(db_path: Optional[str] = None) -> None:
    """Create the ``employees`` table if it does not exist yet.

    Parent directories of the database file are created as needed.
    """
    path = db_path or get_database_path()
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with get_cursor(path) as cursor:
        cursor.executescript(SCHEMA)
