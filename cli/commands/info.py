"""
Info command - display pattern information.
"""

from pathlib import Path

import typer
from rich.console import Console

from splicedrum.analysis import SpliceAnalyzer

from cli.display.tables import display_pattern_info, display_tracks_table

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help=".splice file to analyze"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Show raw header bytes"),
    full: bool = typer.Option(False, "--full", "-f", help="Also show the track table"),
) -> None:
    """
    Display pattern information.

    Shows version, tempo, track count and where decoding stopped, which
    reveals corrupted or truncated files that decode silently.

    Examples:

        splicedrum info pattern_1.splice

        splicedrum info pattern_1.splice --full --raw
    """
    if not file.is_file():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    analysis = SpliceAnalyzer().analyze_file(file)

    display_pattern_info(analysis, show_raw=raw)

    if not analysis.valid:
        console.print(f"[red]Error: {analysis.error}[/red]")
        raise typer.Exit(1)

    if full:
        console.print()
        display_tracks_table(analysis, show_offsets=True)


if __name__ == "__main__":
    app()
