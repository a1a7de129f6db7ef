# ABOUTME: Parser for text indexes of ebook files produced by directory-listing tools.
# ABOUTME: Tracks the current directory marker and emits (path, kind) entries.

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

from kindlebooks.core.suffix import detect_suffix, is_directory_marker

logger = logging.getLogger(__name__)


class IndexReadError(Exception):
    """Raised when an index file cannot be read or decoded."""


class IndexEntry(NamedTuple):
    """A book line from an index, prefixed with its directory marker."""

    path: str
    kind: str


def parse_index(lines: Iterable[str]) -> list[IndexEntry]:
    """Extract book entries from the lines of a text index.

    A line starting with '.' or '/' becomes the current directory. Any line
    ending in a known ebook suffix is emitted as the current directory
    concatenated with the line, with no separator in between. The two checks
    are independent: a directory line that ends in a book suffix first becomes
    the current directory and is then emitted prefixed with itself.

    Args:
        lines: Index lines, with or without trailing newlines.

    Returns:
        Entries in input order.
    """
    current_directory = ""
    entries: list[IndexEntry] = []

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")

        if is_directory_marker(line):
            current_directory = line

        kind = detect_suffix(line)
        if kind is not None:
            entries.append(IndexEntry(current_directory + line, kind))

    return entries


def read_index_file(path: Path) -> list[str]:
    """Read all lines of a UTF-8 index file.

    Raises:
        IndexReadError: If the file is missing, unreadable, or not UTF-8.
    """
    # Universal newlines: only \n, \r and \r\n end a line.
    try:
        with open(path, encoding="utf-8") as f:
            return [line.rstrip("\n") for line in f]
    except (OSError, UnicodeDecodeError) as exc:
        raise IndexReadError(f"Cannot read index file {path}: {exc}") from exc


def parse_index_file(path: Path) -> list[IndexEntry]:
    """Read and parse an index file in one step."""
    entries = parse_index(read_index_file(path))
    logger.debug("Parsed %d book entries from %s", len(entries), path)
    return entries
