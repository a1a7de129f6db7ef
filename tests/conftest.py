# ABOUTME: Shared pytest fixtures for kindlebooks tests.
# ABOUTME: Provides temporary databases and sample directory-listing index files.

import sqlite3
from collections.abc import Iterator
from pathlib import Path

import pytest

from kindlebooks.core.service import CatalogService
from kindlebooks.db.connection import open_library

SAMPLE_INDEX = """\
.
kindle-readme.txt
./Fiction
The Name of the Rose.epub
Dune.mobi
cover.jpg
./Technical
Fluent Python.pdf
SICP.azw3
notes.txt.bak
"""


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a temporary catalog database (not yet created)."""
    return tmp_path / "catalog.db"


@pytest.fixture
def conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    """An open connection to a fresh catalog database."""
    connection = open_library(db_path)
    yield connection
    connection.close()


@pytest.fixture
def service(db_path: Path) -> CatalogService:
    """A CatalogService over a fresh temporary database."""
    return CatalogService(db_path)


@pytest.fixture
def sample_index(tmp_path: Path) -> Path:
    """An index file in the format produced by directory-listing tools.

    Holds five books across three directory markers, plus an image and a
    backup file that must be ignored.
    """
    filepath = tmp_path / "books.txt"
    filepath.write_text(SAMPLE_INDEX, encoding="utf-8")
    return filepath


@pytest.fixture
def undecodable_index(tmp_path: Path) -> Path:
    """An index file that is not valid UTF-8."""
    filepath = tmp_path / "latin1.txt"
    filepath.write_bytes(b"./Libros\nEspa\xf1ol.pdf\n")
    return filepath
