"""
splicedrum - Decoder for .splice drum machine pattern files.

A CLI tool for printing and analyzing .splice patterns.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from splicedrum import __version__

from cli.commands.dump import dump
from cli.commands.export import export
from cli.commands.info import info
from cli.commands.show import show
from cli.commands.tracks import tracks
from cli.commands.validate import validate

console = Console()

app = typer.Typer(
    name="splicedrum",
    help="Decode and analyze .splice drum machine pattern files.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="show")(show)
app.command(name="info")(info)
app.command(name="tracks")(tracks)
app.command(name="validate")(validate)
app.command(name="dump")(dump)
app.command(name="export")(export)


def setup_logging() -> None:
    """Send library log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]splicedrum[/bold] version {__version__}")
    console.print("[dim]Decoder for .splice drum machine pattern files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Log decoder details to stderr"),
) -> None:
    """
    splicedrum - Decode and analyze .splice drum patterns.

    [bold]Quick Start:[/bold]

        splicedrum show pattern_1.splice       # Plain text step grids
        splicedrum info pattern_1.splice       # Header and decode summary

    [bold]Analysis Commands:[/bold]

        splicedrum tracks pattern_1.splice     # Track table
        splicedrum validate pattern_1.splice   # Corruption/truncation check
        splicedrum dump pattern_1.splice       # Annotated hex dump

    [bold]Utility Commands:[/bold]

        splicedrum export pattern_1.splice     # Write a .mid file

    Use --help with any command for more details.
    """
    if debug:
        setup_logging()

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
