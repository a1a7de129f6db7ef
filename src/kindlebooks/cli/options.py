# ABOUTME: Shared Click options for kindlebooks CLI commands.
# ABOUTME: Provides reusable decorators for common flags like --db and --yes.

from pathlib import Path

import click

from kindlebooks.db.connection import DEFAULT_DB_PATH

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="KINDLEBOOKS_DB",
    help=f"Path to catalog database (default: {DEFAULT_DB_PATH}, env: KINDLEBOOKS_DB)",
)

yes_option = click.option(
    "-y", "--yes",
    "assume_yes",
    is_flag=True,
    default=False,
    help="Do not ask for confirmation.",
)
