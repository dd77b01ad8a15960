"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``) and creating the schema on application start
(``init_db``).  It uses SQLite as a lightweight embedded database; to
switch to another DBMS you would replace the connection logic and
adapt the SQL in the repositories accordingly.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

from .config import settings


logger = logging.getLogger(__name__)

# The UNIQUE constraint on ``email`` backs up the duplicate check done
# by ``EmployeeService.save_employee``: two concurrent creates can both
# pass the lookup, only one of them can pass the insert.
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
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    ``db_path`` defaults to :func:`get_database_path`.
    """
    conn = sqlite3.connect(db_path or get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: Optional[str] = None) -> None:
    """Create the ``employees`` table if it does not exist yet."""
    path = db_path or get_database_path()
    conn = get_connection(path)
    try:
        conn.executescript(SCHEMA)
        conn.commit()
        logger.info("Database initialised at %s", path)
    finally:
        conn.close()
