# ABOUTME: Rich table rendering shared by the listing commands.
# ABOUTME: Shows catalog rows and action-log rows verbatim.

from rich.markup import escape
from rich.table import Table

from kindlebooks.core.suffix import UNKNOWN_KIND
from kindlebooks.db.mapping import BookRecord, LogEntry


def book_table(records: list[BookRecord]) -> Table:
    table = Table()
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="bold", overflow="fold")
    table.add_column("Kind")

    for record in records:
        kind = escape(record.kind) if record.kind != UNKNOWN_KIND else f"[dim]{UNKNOWN_KIND}[/dim]"
        table.add_row(str(record.id), escape(record.name), kind)
    return table


def log_table(entries: list[LogEntry]) -> Table:
    table = Table()
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Time", no_wrap=True)
    table.add_column("Action", style="cyan")
    table.add_column("Details", overflow="fold")

    for entry in entries:
        table.add_row(
            str(entry.id), entry.log_time, escape(entry.action), escape(entry.details)
        )
    return table
