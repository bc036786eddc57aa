"""Command-line interface for symcodec using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import logging

import click

from symcodec import __version__


@click.group()
@click.version_option(version=__version__)
@click.option(
    "verbose",
    "-v",
    "--verbose",
    count=True,
    help="Increase log output (-v: info, -vv: debug).",
)
def cli(verbose: int) -> None:
    """symcodec: fixed-width symbol codec for text files."""

    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands
from symcodec.commands.encode import encode  # noqa: E402
from symcodec.commands.decode import decode  # noqa: E402
from symcodec.commands.inspect import inspect  # noqa: E402

cli.add_command(encode)
cli.add_command(decode)
cli.add_command(inspect)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
