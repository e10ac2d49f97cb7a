"""
Export command - convert a .splice pattern to a Standard MIDI File.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from splicedrum import FormatError, decode_file
from splicedrum.converters.splice_to_midi import convert_splice_to_midi

console = Console()
app = typer.Typer()


@app.command()
def export(
    source: Path = typer.Argument(..., help="Source .splice file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output .mid path"),
    bars: int = typer.Option(1, "--bars", "-b", min=1, help="Number of bars to write"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show tracebacks on errors"),
) -> None:
    """
    Export a pattern to a MIDI file on the GM drum channel.

    Examples:

        splicedrum export pattern_1.splice

        splicedrum export pattern_1.splice -o groove.mid --bars 4
    """
    if not source.is_file():
        console.print(f"[red]Error: Source file not found: {source}[/red]")
        raise typer.Exit(1)

    output_path = output or source.with_suffix(".mid")

    try:
        pattern = decode_file(source)
        midi = convert_splice_to_midi(pattern, output_path, bars=bars)
    except (FormatError, OSError) as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    console.print(f"[green]Exported:[/green] {source} -> {output_path}")
    console.print(
        f"[dim]{len(pattern.tracks)} tracks, {bars} bar(s), {midi.length:.2f} seconds[/dim]"
    )


if __name__ == "__main__":
    app()
