"""
Show command - print a pattern as plain text.
"""

from pathlib import Path

import typer
from rich.console import Console

from splicedrum import FormatError, decode_file

console = Console(stderr=True)
app = typer.Typer()


@app.command()
def show(
    file: Path = typer.Argument(..., help=".splice file to print"),
) -> None:
    """
    Print the decoded pattern as plain text.

    Output is the version line, the tempo line and one step grid per track:

        Saved with HW Version: 0.808-alpha
        Tempo: 120
        (0) kick	|x---|x---|x---|x---|

    Examples:

        splicedrum show pattern_1.splice
    """
    if not file.is_file():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        pattern = decode_file(file)
    except FormatError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    typer.echo(pattern.to_text(), nl=False)


if __name__ == "__main__":
    app()
