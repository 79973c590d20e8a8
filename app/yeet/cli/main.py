"""Main CLI application entry point.

Defines the Typer application. Paths are yeeted by default; ``--restore``
moves them back, ``--empty`` deletes the dumpster contents and
``--init-config`` writes a default config file.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from yeet import __version__
from yeet.cli.display import print_contents, print_results
from yeet.core.config import ConfigError, YeetConfig, load_config, save_config
from yeet.core.errors import YeetError
from yeet.core.paths import get_config_path
from yeet.dumpster.engine import Dumpster
from yeet.dumpster.models import Verb
from yeet.dumpster.operator import DumpsterOperator
from yeet.utils.formatting import err_console, print_error, print_info, print_success

app = typer.Typer(
    name="yeet",
    help="Move files into a recoverable dumpster instead of deleting them.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"yeet version {__version__}")
        raise typer.Exit()


def init_config_file() -> None:
    """Write a config file with the default settings unless one exists.

    Raises:
        typer.Exit: With code 1 if the config location cannot be written.
    """
    try:
        path = get_config_path()
        if path.exists():
            print_info(f"Config file already exists: {path}")
            return
        save_config(YeetConfig(), path)
    except (ConfigError, YeetError) as e:
        print_error(f"failed to write config: {e}")
        raise typer.Exit(code=1) from e
    print_success(f"Created config file: {path}")


def configure_logging(verbose: bool) -> None:
    """Route log records through Rich on stderr.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def main(
    ctx: typer.Context,
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="Paths to yeet, or to restore with --restore.", show_default=False),
    ] = None,
    restore: Annotated[
        bool,
        typer.Option("--restore", "-r", help="Restore paths from the dumpster."),
    ] = False,
    empty: Annotated[
        bool,
        typer.Option("--empty", help="Permanently delete everything in the dumpster."),
    ] = False,
    list_contents: Annotated[
        bool,
        typer.Option("--list", "-l", help="List the dumpster contents."),
    ] = False,
    init_config: Annotated[
        bool,
        typer.Option("--init-config", help="Write a default config file and exit."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress non-essential output."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """yeet - move files into ~/.dumpster instead of deleting them.

    Each path is processed on its own; a failing path is reported as
    [bold]<path>: <message>[/bold] and the remaining paths are still processed.
    """
    if sum((restore, empty, list_contents, init_config)) > 1:
        raise typer.BadParameter(
            "--restore, --empty, --list and --init-config are mutually exclusive"
        )

    if init_config:
        configure_logging(verbose)
        init_config_file()
        return

    arguments = paths or []
    if not arguments and not (empty or list_contents):
        typer.echo(ctx.get_help())
        raise typer.Exit()

    configure_logging(verbose)

    try:
        dumpster = Dumpster.with_default_location(load_config())
    except (ConfigError, YeetError) as e:
        print_error(f"failed to initialize dumpster: {e}")
        raise typer.Exit(code=1) from e

    if list_contents:
        try:
            entries = dumpster.contents()
        except YeetError as e:
            print_error(f"failed to list dumpster: {e}")
            raise typer.Exit(code=1) from e
        print_contents(entries)
        return

    operator = DumpsterOperator(dumpster)

    if empty:
        try:
            results = operator.run(Verb.EMPTY, [])
        except YeetError as e:
            print_error(f"failed to empty dumpster: {e}")
            raise typer.Exit(code=1) from e
        if not results and not quiet:
            print_info("The dumpster is already empty.")
    else:
        results = operator.run(Verb.RESTORE if restore else Verb.YEET, arguments)

    # Per-item failures are reported but do not change the exit status
    print_results(results, quiet=quiet)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
