"""
Tracks command - track listing with step grids.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from splicedrum.analysis import SpliceAnalyzer

from cli.display.tables import display_tracks_table

console = Console()
app = typer.Typer()


@app.command()
def tracks(
    file: Path = typer.Argument(..., help=".splice file to analyze"),
    track_id: Optional[int] = typer.Option(None, "--id", "-i", help="Only show tracks with this id"),
    offsets: bool = typer.Option(False, "--offsets", "-o", help="Show record offsets and sizes"),
) -> None:
    """
    List the tracks of a pattern with their step grids.

    Examples:

        splicedrum tracks pattern_1.splice

        splicedrum tracks pattern_1.splice --id 0 --offsets
    """
    if not file.is_file():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    analysis = SpliceAnalyzer().analyze_file(file)

    if not analysis.valid:
        console.print(f"[red]Error: {analysis.error}[/red]")
        raise typer.Exit(1)

    if track_id is not None:
        analysis.tracks = [t for t in analysis.tracks if t.id == track_id]

    display_tracks_table(analysis, show_offsets=offsets)


if __name__ == "__main__":
    app()
