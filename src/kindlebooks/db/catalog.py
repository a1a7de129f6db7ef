# ABOUTME: CRUD operations for the kindlebooks book catalog.
# ABOUTME: Transactional bulk insert, single-record add/update/delete, list and search.

import logging
import sqlite3
from collections.abc import Iterable

from kindlebooks.core.suffix import classify
from kindlebooks.db.mapping import BookRecord, row_to_book

logger = logging.getLogger(__name__)


class CatalogStoreError(Exception):
    """Raised when the catalog database rejects a read or a batch write."""


class LibraryCatalog:
    """Wraps a sqlite3 connection and provides typed CRUD for the books table.

    Single-record writes report success as a bool, since a missing row or a
    blank name is an expected outcome. Batch writes and reads raise
    CatalogStoreError.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def bulk_insert(self, entries: Iterable[tuple[str, str]]) -> int:
        """Insert many (name, kind) pairs in a single transaction.

        Either every row is committed or none is.

        Returns:
            The number of rows inserted.

        Raises:
            CatalogStoreError: If any row fails; the batch is rolled back.
        """
        rows = [(name, kind) for name, kind in entries]
        if not rows:
            return 0

        try:
            self._conn.executemany("INSERT INTO books (name, kind) VALUES (?, ?)", rows)
            self._conn.commit()
        except sqlite3.Error as exc:
            self._conn.rollback()
            raise CatalogStoreError(
                f"Bulk insert of {len(rows)} book(s) failed and was rolled back: {exc}"
            ) from exc

        logger.info("Inserted %d book(s)", len(rows))
        return len(rows)

    def insert_one(self, name: str, kind: str) -> bool:
        """Add a single book. Name and kind are stored trimmed.

        Returns:
            False if either field is blank or the insert fails.
        """
        if not name or not name.strip() or not kind or not kind.strip():
            return False

        try:
            cursor = self._conn.execute(
                "INSERT INTO books (name, kind) VALUES (?, ?)",
                (name.strip(), kind.strip()),
            )
            self._conn.commit()
        except sqlite3.Error as exc:
            self._conn.rollback()
            logger.warning("Could not add book %r: %s", name, exc)
            return False

        return cursor.rowcount > 0

    def update(self, book_id: int, new_name: str) -> bool:
        """Rename a book, recomputing its kind from the new name's suffix.

        Returns:
            False if the name is blank, no book has this ID, or the write fails.
        """
        if not new_name or not new_name.strip():
            return False

        name = new_name.strip()
        try:
            cursor = self._conn.execute(
                "UPDATE books SET name = ?, kind = ? WHERE id = ?",
                (name, classify(name), book_id),
            )
            self._conn.commit()
        except sqlite3.Error as exc:
            self._conn.rollback()
            logger.warning("Could not update book %d: %s", book_id, exc)
            return False

        return cursor.rowcount > 0

    def delete(self, book_id: int) -> bool:
        """Delete a book. Returns False if no book has this ID."""
        try:
            cursor = self._conn.execute("DELETE FROM books WHERE id = ?", (book_id,))
            self._conn.commit()
        except sqlite3.Error as exc:
            self._conn.rollback()
            logger.warning("Could not delete book %d: %s", book_id, exc)
            return False

        return cursor.rowcount > 0

    def clear_all(self) -> None:
        """Delete every book and restart ID assignment from 1.

        Raises:
            CatalogStoreError: If the tables cannot be cleared.
        """
        try:
            self._conn.execute("DELETE FROM books")
            self._conn.execute("DELETE FROM sqlite_sequence WHERE name = 'books'")
            self._conn.commit()
        except sqlite3.Error as exc:
            self._conn.rollback()
            raise CatalogStoreError(f"Could not clear the catalog: {exc}") from exc

    def get_by_id(self, book_id: int) -> BookRecord | None:
        """Retrieve a book by its row ID."""
        row = self._fetch("SELECT id, name, kind FROM books WHERE id = ?", (book_id,))
        return row_to_book(row[0]) if row else None

    def count(self) -> int:
        """Number of books in the catalog."""
        rows = self._fetch("SELECT COUNT(*) FROM books")
        return rows[0][0]

    def list_all(self) -> list[BookRecord]:
        """Return all books, newest first."""
        rows = self._fetch("SELECT id, name, kind FROM books ORDER BY id DESC")
        return [row_to_book(row) for row in rows]

    def search(self, keyword: str) -> list[BookRecord]:
        """Return books whose name contains keyword, newest first.

        Uses SQLite LIKE, which is case-insensitive for ASCII letters. An
        empty keyword matches every book.
        """
        rows = self._fetch(
            "SELECT id, name, kind FROM books "
            "WHERE name LIKE '%' || ? || '%' "
            "ORDER BY id DESC",
            (keyword,),
        )
        return [row_to_book(row) for row in rows]

    def _fetch(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise CatalogStoreError(f"Catalog query failed: {exc}") from exc
