# ABOUTME: Public API for the kindlebooks database layer.
# ABOUTME: Exports connection management, catalog and action-log stores, and record types.

from kindlebooks.db.action_log import ActionLog
from kindlebooks.db.catalog import CatalogStoreError, LibraryCatalog
from kindlebooks.db.connection import DEFAULT_DB_PATH, library_connection, open_library
from kindlebooks.db.mapping import BookRecord, LogEntry

__all__ = [
    "DEFAULT_DB_PATH",
    "ActionLog",
    "BookRecord",
    "CatalogStoreError",
    "LibraryCatalog",
    "LogEntry",
    "library_connection",
    "open_library",
]
