"""CLI application and command routing."""

import logging

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import compare, config, show
from cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Inspect and compare calendar view header styles.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show informational log output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up logging and the shared context before any command runs."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    logger.debug("CLI context initialized")


app.command("show")(show)
app.command("compare")(compare)
app.command("config")(config)
