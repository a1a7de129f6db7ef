# ABOUTME: SQLite connection management for the kindlebooks catalog.
# ABOUTME: Creates the database and schema once, and scopes per-operation connections.

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from kindlebooks.db.schema import SCHEMA

DEFAULT_DB_PATH = Path.home() / ".kindlebooks" / "library.db"


def ensure_schema(conn: sqlite3.Connection) -> None:
    """Create the books and logs tables if they do not exist. Idempotent."""
    conn.executescript(SCHEMA)


def _connect(db_path: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    return conn


def open_library(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the kindlebooks database.

    Creates the database file and parent directories if they don't exist,
    applies the schema, and sets WAL journal mode and the sqlite3.Row
    factory for dict-like column access.

    Args:
        path: Path to the database file. Defaults to ~/.kindlebooks/library.db.

    Returns:
        A configured sqlite3.Connection. The caller is responsible for closing it.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = _connect(db_path)
    try:
        conn.execute("PRAGMA journal_mode=WAL")
        ensure_schema(conn)
    except sqlite3.Error:
        conn.close()
        raise
    return conn


@contextmanager
def library_connection(path: Path | None = None) -> Iterator[sqlite3.Connection]:
    """Yield a short-lived connection to an initialized database.

    The schema is assumed to exist (see open_library). The connection is
    closed on every exit path, including errors.
    """
    conn = _connect(path or DEFAULT_DB_PATH)
    try:
        yield conn
    finally:
        conn.close()
