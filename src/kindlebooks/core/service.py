# ABOUTME: Catalog service: the synchronous API the presentation layer calls into.
# ABOUTME: Runs index imports into the catalog and exposes book and action-log operations.

import logging
import sqlite3
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

from kindlebooks.core.index_parser import IndexEntry, parse_index, parse_index_file
from kindlebooks.core.suffix import classify
from kindlebooks.db.action_log import ActionLog
from kindlebooks.db.catalog import CatalogStoreError, LibraryCatalog
from kindlebooks.db.connection import DEFAULT_DB_PATH, library_connection, open_library
from kindlebooks.db.mapping import BookRecord, LogEntry

logger = logging.getLogger(__name__)

LOG_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_log_time(moment: datetime | None = None) -> str:
    """Format a timestamp for the action log (local time by default)."""
    return (moment or datetime.now()).strftime(LOG_TIME_FORMAT)


class CatalogService:
    """Entry point for importing and maintaining the book catalog.

    The database is initialized once, on construction. Every operation then
    opens its own short-lived connection and closes it before returning, so
    an instance holds no connection state and can be called from a
    background worker.
    """

    def __init__(self, db_path: Path | None = None) -> None:
        self._db_path = db_path or DEFAULT_DB_PATH
        open_library(self._db_path).close()

    @property
    def db_path(self) -> Path:
        return self._db_path

    # --- Import ---

    def import_from_text(self, lines: Iterable[str]) -> int:
        """Parse index lines and add every book entry to the catalog.

        Existing books are kept; the import is additive.

        Returns:
            The number of books added.

        Raises:
            CatalogStoreError: If the batch fails; nothing is committed.
        """
        return self._insert_entries(parse_index(lines))

    def import_from_file(self, path: Path) -> int:
        """Import an index file. See import_from_text.

        Raises:
            IndexReadError: If the file cannot be read; the catalog is untouched.
            CatalogStoreError: If the batch fails; nothing is committed.
        """
        return self._insert_entries(parse_index_file(path))

    def _insert_entries(self, entries: list[IndexEntry]) -> int:
        with self._catalog() as catalog:
            added = catalog.bulk_insert(entries)
        logger.info("Imported %d book(s) into %s", added, self._db_path)
        return added

    @contextmanager
    def _catalog(self) -> Iterator[LibraryCatalog]:
        """Yield a LibraryCatalog on a fresh connection.

        Raises:
            CatalogStoreError: If the database cannot be opened.
        """
        try:
            with library_connection(self._db_path) as conn:
                yield LibraryCatalog(conn)
        except sqlite3.Error as exc:
            raise CatalogStoreError(f"Cannot open catalog {self._db_path}: {exc}") from exc

    # --- Books ---

    def add_book(self, name: str, kind: str) -> bool:
        """Add a book with an explicit kind. False if either is blank."""
        if not name or not name.strip() or not kind or not kind.strip():
            return False
        try:
            with self._catalog() as catalog:
                return catalog.insert_one(name, kind)
        except CatalogStoreError as exc:
            logger.warning("Could not add book %r: %s", name, exc)
            return False

    def add_book_inferred(self, full_name: str) -> bool:
        """Add a book, inferring its kind from the name's suffix."""
        if not full_name or not full_name.strip():
            return False
        return self.add_book(full_name, classify(full_name.strip()))

    def update_book(self, book_id: int, new_name: str) -> bool:
        try:
            with self._catalog() as catalog:
                return catalog.update(book_id, new_name)
        except CatalogStoreError as exc:
            logger.warning("Could not update book %d: %s", book_id, exc)
            return False

    def delete_book(self, book_id: int) -> bool:
        try:
            with self._catalog() as catalog:
                return catalog.delete(book_id)
        except CatalogStoreError as exc:
            logger.warning("Could not delete book %d: %s", book_id, exc)
            return False

    def clear_all_books(self) -> None:
        with self._catalog() as catalog:
            catalog.clear_all()

    def get_book(self, book_id: int) -> BookRecord | None:
        with self._catalog() as catalog:
            return catalog.get_by_id(book_id)

    def query(self, keyword: str | None = None) -> list[BookRecord]:
        """List all books, or only those whose name contains keyword."""
        with self._catalog() as catalog:
            if not keyword:
                return catalog.list_all()
            return catalog.search(keyword)

    # --- Action log ---

    def append_log(self, log_time: str, action: str, details: str) -> bool:
        """Append an action-log entry. Never raises."""
        try:
            with library_connection(self._db_path) as conn:
                return ActionLog(conn).append(log_time, action, details)
        except sqlite3.Error as exc:
            logger.warning("Could not open action log: %s", exc)
            return False

    def record_action(self, action: str, details: str) -> bool:
        """Append an action-log entry stamped with the current time."""
        return self.append_log(format_log_time(), action, details)

    def list_logs(self) -> list[LogEntry]:
        try:
            with library_connection(self._db_path) as conn:
                return ActionLog(conn).list_all()
        except sqlite3.Error as exc:
            logger.warning("Could not open action log: %s", exc)
            return []

    def delete_log(self, log_id: int) -> bool:
        try:
            with library_connection(self._db_path) as conn:
                return ActionLog(conn).delete_one(log_id)
        except sqlite3.Error as exc:
            logger.warning("Could not open action log: %s", exc)
            return False

    def clear_logs(self) -> bool:
        try:
            with library_connection(self._db_path) as conn:
                return ActionLog(conn).clear_all()
        except sqlite3.Error as exc:
            logger.warning("Could not open action log: %s", exc)
            return False
