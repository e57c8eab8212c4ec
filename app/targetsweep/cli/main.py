"""Main CLI application entry point.

Defines the Typer application: sweep every path given on the command
line, or a single path read from standard input when none is given.
"""

import sys
from typing import Annotated

import typer

from targetsweep import __version__
from targetsweep.core.log import configure_logging
from targetsweep.sweep.operator import RemovalError
from targetsweep.sweep.sweeper import TreeSweeper
from targetsweep.utils.formatting import format_path, print_error

PROMPT = "Enter the path: "

app = typer.Typer(
    name="targetsweep",
    help="Delete Cargo build output directories (target/) next to a Cargo.toml.",
    add_completion=False,
    rich_markup_mode="rich",
    # Unknown dash tokens such as "-crate" are directory names, not options
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"targetsweep version {__version__}")
        raise typer.Exit()


def report_removal(path: str) -> None:
    """Write a removed output directory to stdout, one quoted path per line."""
    typer.echo(format_path(path))


def read_path_from_stdin() -> str:
    """Prompt on stderr and read one starting path from stdin.

    Returns:
        The line read, stripped of surrounding whitespace. An empty
        string is returned as-is and never widened to the current directory.

    Raises:
        typer.Exit: If standard input cannot be read.
    """
    typer.echo(PROMPT, err=True, nl=False)
    try:
        line = sys.stdin.readline()
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Failed to read path from standard input: {e}")
        raise typer.Exit(code=1) from e
    return line.strip()


@app.command()
def main(
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            help="Directories to sweep, in order. Prompts for one if omitted.",
            show_default=False,
        ),
    ] = None,
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log skipped directories and removals to stderr.",
        ),
    ] = False,
) -> None:
    """Sweep each PATH and delete every [bold]target[/bold] directory that sits beside a Cargo.toml.

    A target directory without a sibling Cargo.toml is kept and searched
    like any other directory. The first directory that cannot be removed
    aborts the run. Put paths after -- when they could be read as -h, -v or -V.
    """
    configure_logging(verbose)

    roots = list(paths) if paths else [read_path_from_stdin()]
    sweeper = TreeSweeper(on_remove=report_removal)

    for root in roots:
        try:
            sweeper.sweep(root)
        except RemovalError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
