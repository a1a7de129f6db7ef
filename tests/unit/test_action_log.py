# ABOUTME: Unit tests for the best-effort action log.
# ABOUTME: Validates append/list/delete/clear and that store failures never raise.

import logging
import sqlite3
from unittest.mock import MagicMock

import pytest

from kindlebooks.db.action_log import ActionLog
from kindlebooks.db.catalog import LibraryCatalog
from kindlebooks.db.mapping import LogEntry


@pytest.fixture()
def action_log(conn: sqlite3.Connection) -> ActionLog:
    return ActionLog(conn)


@pytest.fixture()
def broken_log() -> ActionLog:
    """An ActionLog whose connection rejects every statement."""
    conn = MagicMock(spec=sqlite3.Connection)
    conn.execute.side_effect = sqlite3.OperationalError("disk I/O error")
    return ActionLog(conn)


class TestAppendAndList:
    def test_append_and_list(self, action_log: ActionLog) -> None:
        assert action_log.append("2025-01-02 03:04:05", "Import", "Imported file: a.txt")
        assert action_log.list_all() == [
            LogEntry(
                id=1,
                log_time="2025-01-02 03:04:05",
                action="Import",
                details="Imported file: a.txt",
            )
        ]

    def test_newest_first(self, action_log: ActionLog) -> None:
        action_log.append("2025-01-01 00:00:00", "Add Book", "one")
        action_log.append("2025-01-01 00:00:01", "Delete Book", "two")
        assert [e.details for e in action_log.list_all()] == ["two", "one"]

    def test_empty(self, action_log: ActionLog) -> None:
        assert action_log.list_all() == []

    def test_null_columns_read_as_empty(self, conn: sqlite3.Connection, action_log: ActionLog) -> None:
        conn.execute("INSERT INTO logs (log_time, action, details) VALUES (NULL, 'X', NULL)")
        conn.commit()
        [entry] = action_log.list_all()
        assert entry.log_time == ""
        assert entry.details == ""


class TestDelete:
    def test_delete_one(self, action_log: ActionLog) -> None:
        action_log.append("t", "a", "first")
        action_log.append("t", "a", "second")
        assert action_log.delete_one(1) is True
        assert [e.details for e in action_log.list_all()] == ["second"]

    def test_delete_missing(self, action_log: ActionLog) -> None:
        assert action_log.delete_one(7) is False

    def test_clear_all(self, action_log: ActionLog) -> None:
        action_log.append("t", "a", "x")
        action_log.append("t", "a", "y")
        assert action_log.clear_all() is True
        assert action_log.list_all() == []

    def test_clear_empty_log(self, action_log: ActionLog) -> None:
        assert action_log.clear_all() is True


class TestIndependentOfCatalog:
    """Logs and books have independent lifecycles."""

    def test_deleting_books_keeps_logs(self, conn: sqlite3.Connection, action_log: ActionLog) -> None:
        catalog = LibraryCatalog(conn)
        catalog.insert_one("a.pdf", "pdf")
        action_log.append("t", "Add Book", "Added book: a.pdf")

        catalog.clear_all()

        assert len(action_log.list_all()) == 1

    def test_clearing_logs_keeps_books(self, conn: sqlite3.Connection, action_log: ActionLog) -> None:
        catalog = LibraryCatalog(conn)
        catalog.insert_one("a.pdf", "pdf")
        action_log.append("t", "Add Book", "Added book: a.pdf")

        action_log.clear_all()

        assert catalog.count() == 1


class TestFailuresAreNonFatal:
    def test_append_failure(self, broken_log: ActionLog, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert broken_log.append("t", "Import", "x") is False
        assert any("disk I/O error" in r.message for r in caplog.records)

    def test_list_failure(self, broken_log: ActionLog) -> None:
        assert broken_log.list_all() == []

    def test_delete_failure(self, broken_log: ActionLog) -> None:
        assert broken_log.delete_one(1) is False

    def test_clear_failure(self, broken_log: ActionLog) -> None:
        assert broken_log.clear_all() is False
