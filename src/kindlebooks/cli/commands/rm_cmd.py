# ABOUTME: The `kindlebooks rm` command for deleting a single cataloged book.
# ABOUTME: Asks for confirmation unless --yes is given.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from kindlebooks.cli.options import db_option, yes_option
from kindlebooks.core.service import CatalogService

console = Console()


@click.command("rm")
@click.argument("book_id", type=int)
@db_option
@yes_option
def rm(book_id: int, db_path: Path | None, assume_yes: bool) -> None:
    """Delete book BOOK_ID from the catalog."""
    service = CatalogService(db_path)

    record = service.get_book(book_id)
    if record is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)

    if not assume_yes and not click.confirm(f"Delete {record.name}?"):
        console.print("Cancelled.")
        return

    if not service.delete_book(book_id):
        console.print(f"[red]Could not delete book {book_id}.[/red]")
        raise SystemExit(1)

    service.record_action("Delete Book", f"Deleted ID: {book_id} name: {record.name}")
    console.print(f"Deleted [bold]{escape(record.name)}[/bold].")
