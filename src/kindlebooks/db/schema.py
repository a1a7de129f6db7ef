# ABOUTME: SQL DDL statements for the kindlebooks catalog database.
# ABOUTME: Defines the books catalog table and the independent action log table.

SCHEMA = """
-- Book catalog: one row per indexed ebook
CREATE TABLE IF NOT EXISTS books (
    id    INTEGER PRIMARY KEY AUTOINCREMENT,
    name  TEXT NOT NULL,
    kind  TEXT NOT NULL
);

-- Audit trail of mutating operations, not linked to books
CREATE TABLE IF NOT EXISTS logs (
    id        INTEGER PRIMARY KEY AUTOINCREMENT,
    log_time  TEXT,
    action    TEXT,
    details   TEXT
);
"""
