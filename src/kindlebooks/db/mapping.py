# ABOUTME: Typed records for rows of the books and logs tables.
# ABOUTME: Converts sqlite3.Row objects into BookRecord and LogEntry dataclasses.

from dataclasses import dataclass
from typing import Any


@dataclass
class BookRecord:
    """A cataloged book: its row ID, full path or title, and kind."""

    id: int
    name: str
    kind: str


@dataclass
class LogEntry:
    """One entry of the action log."""

    id: int
    log_time: str
    action: str
    details: str


def row_to_book(row: Any) -> BookRecord:
    """Convert a books row (dict-like) to a BookRecord."""
    return BookRecord(id=row["id"], name=row["name"], kind=row["kind"])


def row_to_log(row: Any) -> LogEntry:
    """Convert a logs row (dict-like) to a LogEntry.

    NULL columns become empty strings so callers can display them verbatim.
    """
    return LogEntry(
        id=row["id"],
        log_time=row["log_time"] or "",
        action=row["action"] or "",
        details=row["details"] or "",
    )
