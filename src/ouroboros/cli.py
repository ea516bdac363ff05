"""Ouroboros CLI: incremental file versioning into a local memory."""

import typer
from rich.console import Console

from ouroboros import __version__

from .commands import history, ingest, init, store
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"ouroboros {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="ouroboros",
    help="Incremental, content-addressed file versioning",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Debug logging with timestamps and source locations",
    ),
) -> None:
    """Ouroboros - version files into a local memory directory."""
    log_console = configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
        debug=debug,
    )
    set_output_context(
        OutputContext(
            console=Console(no_color=no_color),
            json_mode=json_output,
            quiet=quiet,
            log_console=log_console,
        )
    )


app.command()(init)
app.command()(ingest)
app.command()(history)
app.command()(store)


if __name__ == "__main__":
    app()
