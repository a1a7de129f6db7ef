# ABOUTME: The `kindlebooks ls` command for listing cataloged books.
# ABOUTME: Displays a Rich table of books, newest first, optionally filtered by name.

from pathlib import Path

import click
from rich.console import Console

from kindlebooks.cli.display import book_table
from kindlebooks.cli.options import db_option
from kindlebooks.core.service import CatalogService

console = Console()


@click.command("ls")
@db_option
@click.option(
    "-s", "--search",
    "keyword",
    default=None,
    help="Only show books whose name contains this text.",
)
def ls(db_path: Path | None, keyword: str | None) -> None:
    """List the books in the catalog, newest first."""
    service = CatalogService(db_path)
    records = service.query(keyword)
    if keyword is not None:
        service.record_action("Search", f"Keyword: {keyword}")

    if not records:
        console.print("[yellow]No books in the catalog.[/yellow]")
        return

    console.print(book_table(records))
    console.print(f"\n[dim]{len(records)} book(s)[/dim]")
