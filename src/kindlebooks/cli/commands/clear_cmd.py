# ABOUTME: The `kindlebooks clear` command for emptying the catalog.
# ABOUTME: Removes every book and restarts ID numbering; the action log is kept.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from kindlebooks.cli.options import db_option, yes_option
from kindlebooks.core.service import CatalogService
from kindlebooks.db.catalog import CatalogStoreError

console = Console()


@click.command("clear")
@db_option
@yes_option
def clear(db_path: Path | None, assume_yes: bool) -> None:
    """Delete every book from the catalog. This cannot be undone."""
    if not assume_yes and not click.confirm("Delete ALL books from the catalog?"):
        console.print("Cancelled.")
        return

    service = CatalogService(db_path)
    try:
        service.clear_all_books()
    except CatalogStoreError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    service.record_action("Clear DB", "Cleared all books")
    console.print("[green]Catalog cleared.[/green]")
