# ABOUTME: Suffix classification for ebook file names in a text index.
# ABOUTME: Maps a name to one of the known ebook kinds, or "unknown".

BOOK_KINDS: tuple[str, ...] = ("pdf", "mobi", "epub", "azw3", "html", "txt")

UNKNOWN_KIND = "unknown"

_DIRECTORY_PREFIXES = (".", "/")


def detect_suffix(name: str) -> str | None:
    """Return the ebook kind named by the final suffix, or None.

    Only the text after the last dot counts, and the comparison is
    case-sensitive, so "notes.txt.bak" and "BOOK.PDF" are not books.
    """
    _, dot, suffix = name.rpartition(".")
    if dot and suffix in BOOK_KINDS:
        return suffix
    return None


def classify(name: str) -> str:
    """Classify a file name as one of BOOK_KINDS or UNKNOWN_KIND."""
    return detect_suffix(name) or UNKNOWN_KIND


def is_directory_marker(line: str) -> bool:
    """Whether an index line names a directory (starts with '.' or '/')."""
    return line.startswith(_DIRECTORY_PREFIXES)
