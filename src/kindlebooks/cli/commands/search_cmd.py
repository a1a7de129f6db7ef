# ABOUTME: The `kindlebooks search` command for finding books by name.
# ABOUTME: Substring match on the stored path or title.

from pathlib import Path

import click
from rich.console import Console

from kindlebooks.cli.display import book_table
from kindlebooks.cli.options import db_option
from kindlebooks.core.service import CatalogService

console = Console()


@click.command("search")
@click.argument("keyword")
@db_option
def search(keyword: str, db_path: Path | None) -> None:
    """Search the catalog for books whose name contains KEYWORD."""
    service = CatalogService(db_path)
    results = service.query(keyword)
    service.record_action("Search", f"Keyword: {keyword}")

    if not results:
        console.print("[yellow]No results found.[/yellow]")
        return

    console.print(book_table(results))
    console.print(f"\n[dim]{len(results)} result(s)[/dim]")
