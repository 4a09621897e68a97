import logging
from pathlib import Path

import typer

from ..app import app, app_state
from ...lib.log import logger

# Import commands
from . import query

__all__ = ['query']


@app.callback()
def setup(
        ctx: typer.Context,
        input_path: Path = typer.Option(
            Path("-"),
            "--input", "-i",
            envvar="BICOCO_INPUT",
            help="JSON array file to read, '-' for stdin",
            dir_okay=False,
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose", "-v",
            help="Log what the command does",
        ),
):
    """
    bicoco command line interface, list helpers over JSON arrays
    """
    if ctx.resilient_parsing:
        return

    # If no subcommand is provided, show complete help like --help
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)

    app_state.input_path = input_path
    app_state.verbose = verbose
    if verbose:
        logger.setLevel(logging.DEBUG)
