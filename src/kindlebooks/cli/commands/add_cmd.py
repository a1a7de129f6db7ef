# ABOUTME: The `kindlebooks add` command for cataloging a single book by hand.
# ABOUTME: Uses an explicit kind when given, otherwise infers it from the name's suffix.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from kindlebooks.cli.options import db_option
from kindlebooks.core.service import CatalogService

console = Console()


@click.command("add")
@click.argument("name")
@click.option(
    "-k", "--kind",
    default=None,
    help="Book kind (default: inferred from the name's suffix).",
)
@db_option
def add(name: str, kind: str | None, db_path: Path | None) -> None:
    """Add a single book NAME (a path or title) to the catalog."""
    service = CatalogService(db_path)

    if kind is None:
        ok = service.add_book_inferred(name)
    else:
        ok = service.add_book(name, kind)

    if not ok:
        console.print("[red]Could not add book: name and kind must not be empty.[/red]")
        raise SystemExit(1)

    service.record_action("Add Book", f"Added book: {name.strip()}")
    console.print(f"Added [bold]{escape(name.strip())}[/bold].")
