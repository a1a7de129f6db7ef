# ABOUTME: The `kindlebooks edit` command for renaming a cataloged book.
# ABOUTME: The book's kind follows the suffix of the new name.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from kindlebooks.cli.options import db_option
from kindlebooks.core.service import CatalogService

console = Console()


@click.command("edit")
@click.argument("book_id", type=int)
@click.argument("new_name")
@db_option
def edit(book_id: int, new_name: str, db_path: Path | None) -> None:
    """Rename book BOOK_ID to NEW_NAME."""
    service = CatalogService(db_path)

    record = service.get_book(book_id)
    if record is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)

    if new_name.strip() == record.name:
        console.print("[yellow]Name unchanged.[/yellow]")
        return

    if not service.update_book(book_id, new_name):
        console.print(f"[red]Could not update book {book_id}.[/red]")
        raise SystemExit(1)

    service.record_action(
        "Edit Book", f"ID: {book_id} old name: {record.name} -> new name: {new_name.strip()}"
    )
    console.print(f"Renamed book {book_id} to [bold]{escape(new_name.strip())}[/bold].")
