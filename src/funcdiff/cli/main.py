"""funcdiff CLI - funcdiff command."""

import click

from funcdiff import __version__
from funcdiff.cli.diff import diff_command
from funcdiff.cli.inventory import inventory_command
from funcdiff.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="funcdiff")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """funcdiff - function-level diffs between two git revisions."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(diff_command, name="diff")
cli.add_command(inventory_command, name="inventory")


if __name__ == "__main__":
    cli()
