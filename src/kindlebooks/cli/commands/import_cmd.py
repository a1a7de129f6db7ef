# ABOUTME: The `kindlebooks import` command for cataloging books from a text index.
# ABOUTME: Parses the index, bulk-inserts the entries, and records the import in the log.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from kindlebooks.cli.options import db_option
from kindlebooks.core.index_parser import IndexReadError
from kindlebooks.core.service import CatalogService
from kindlebooks.db.catalog import CatalogStoreError

console = Console()


@click.command("import")
@click.argument(
    "index_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@db_option
def import_command(index_file: Path, db_path: Path | None) -> None:
    """Import the books listed in INDEX_FILE into the catalog.

    INDEX_FILE is a UTF-8 directory listing: lines starting with '.' or '/'
    set the current directory, lines ending in a known ebook suffix are
    cataloged. Existing books are kept.
    """
    service = CatalogService(db_path)

    try:
        added = service.import_from_file(index_file)
    except IndexReadError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc
    except CatalogStoreError as exc:
        console.print(f"[red]Import failed, no books were added:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    service.record_action("Import", f"Imported file: {index_file.name} ({added} book(s))")

    if not added:
        console.print(f"[yellow]No books found in {escape(index_file.name)}[/yellow]")
        return

    console.print(f"[green]{added} added[/green] from {escape(index_file.name)}")
