# ABOUTME: The `kindlebooks log` command group for the action log.
# ABOUTME: Provides ls, rm, and clear subcommands.

from pathlib import Path

import click
from rich.console import Console

from kindlebooks.cli.display import log_table
from kindlebooks.cli.options import db_option, yes_option
from kindlebooks.core.service import CatalogService

console = Console()


@click.group("log")
def log() -> None:
    """Inspect and prune the action log."""


@log.command("ls")
@db_option
def log_ls(db_path: Path | None) -> None:
    """List action-log entries, newest first."""
    entries = CatalogService(db_path).list_logs()

    if not entries:
        console.print("[yellow]The action log is empty.[/yellow]")
        return

    console.print(log_table(entries))
    console.print(f"\n[dim]{len(entries)} entr{'y' if len(entries) == 1 else 'ies'}[/dim]")


@log.command("rm")
@click.argument("log_id", type=int)
@db_option
def log_rm(log_id: int, db_path: Path | None) -> None:
    """Delete action-log entry LOG_ID."""
    if not CatalogService(db_path).delete_log(log_id):
        console.print(f"[red]Log entry {log_id} not found.[/red]")
        raise SystemExit(1)

    console.print(f"Deleted log entry {log_id}.")


@log.command("clear")
@db_option
@yes_option
def log_clear(db_path: Path | None, assume_yes: bool) -> None:
    """Delete every action-log entry."""
    if not assume_yes and not click.confirm("Delete ALL action-log entries?"):
        console.print("Cancelled.")
        return

    if not CatalogService(db_path).clear_logs():
        console.print("[red]Could not clear the action log.[/red]")
        raise SystemExit(1)

    console.print("[green]Action log cleared.[/green]")
