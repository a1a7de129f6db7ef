# ABOUTME: CLI package for kindlebooks, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import logging

import click

from kindlebooks.cli.commands import (
    add_cmd,
    clear_cmd,
    edit_cmd,
    import_cmd,
    log_cmd,
    ls_cmd,
    rm_cmd,
    search_cmd,
)


@click.group()
@click.version_option(package_name="kindlebooks")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """kindlebooks - catalog ebooks listed in a text index."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


cli.add_command(import_cmd.import_command)
cli.add_command(add_cmd.add)
cli.add_command(edit_cmd.edit)
cli.add_command(rm_cmd.rm)
cli.add_command(clear_cmd.clear)
cli.add_command(ls_cmd.ls)
cli.add_command(search_cmd.search)
cli.add_command(log_cmd.log)
