# ABOUTME: Best-effort audit trail of mutating catalog operations.
# ABOUTME: Appends, lists, and deletes rows of the logs table without ever raising.

import logging
import sqlite3

from kindlebooks.db.mapping import LogEntry, row_to_log

logger = logging.getLogger(__name__)


class ActionLog:
    """Wraps a sqlite3 connection and provides access to the logs table.

    Log entries are free text and are never checked against the catalog.
    Database errors are logged as warnings and reported through the return
    value, so a failing log never interrupts the operation being logged.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def append(self, log_time: str, action: str, details: str) -> bool:
        """Record one action. Returns False if the write failed."""
        return self._write(
            "INSERT INTO logs (log_time, action, details) VALUES (?, ?, ?)",
            (log_time, action, details),
            f"append {action!r}",
        )

    def list_all(self) -> list[LogEntry]:
        """Return all log entries, newest first. Empty on failure."""
        try:
            cursor = self._conn.execute(
                "SELECT id, log_time, action, details FROM logs ORDER BY id DESC"
            )
            return [row_to_log(row) for row in cursor.fetchall()]
        except sqlite3.Error as exc:
            logger.warning("Could not read action log: %s", exc)
            return []

    def delete_one(self, log_id: int) -> bool:
        """Delete a single entry. Returns False if it was not found or on failure."""
        return self._write("DELETE FROM logs WHERE id = ?", (log_id,), f"delete entry {log_id}")

    def clear_all(self) -> bool:
        """Delete every log entry."""
        return self._write("DELETE FROM logs", (), "clear", allow_empty=True)

    def _write(
        self, sql: str, params: tuple, what: str, *, allow_empty: bool = False
    ) -> bool:
        try:
            cursor = self._conn.execute(sql, params)
            self._conn.commit()
        except sqlite3.Error as exc:
            self._conn.rollback()
            logger.warning("Action log %s failed: %s", what, exc)
            return False
        return allow_empty or cursor.rowcount > 0
