"""
Dump command - annotated hex dump of a .splice file.
"""

from pathlib import Path
from typing import List, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from splicedrum.analysis.splice_analyzer import STOP_CORRUPT, SpliceAnalysis, SpliceAnalyzer
from splicedrum.formats.splice.decoder import SpliceOffsets

from cli.display.formatters import stop_reason_text

console = Console()
app = typer.Typer()

# (start, end, name, description, color)
Region = Tuple[int, int, str, str, str]


def build_regions(analysis: SpliceAnalysis) -> List[Region]:
    """
    Map the file into named regions: header fields, then every record field.

    Bytes the decoder never reaches are one IGNORED region.
    """
    regions: List[Region] = []
    size = analysis.filesize

    header = [
        (0, SpliceOffsets.SIGNATURE_LENGTH, "SIGNATURE", "Format signature", "bright_blue"),
        (SpliceOffsets.VERSION_OFFSET, SpliceOffsets.TEMPO_OFFSET, "VERSION", "HW version text", "cyan"),
        (SpliceOffsets.TEMPO_OFFSET, SpliceOffsets.HEADER_SIZE, "TEMPO", "Tempo float32 LE", "yellow"),
    ]
    for start, end, name, desc, color in header:
        if start < size:
            regions.append((start, min(end, size), name, desc, color))

    for track in analysis.tracks:
        base = track.offset
        name_len = track.size - SpliceOffsets.RECORD_FIXED_SIZE
        tag = f"T{track.index}"
        fields = [
            (1, "ID", f"Track id {track.id}", "magenta"),
            (3, "PAD", "Padding 00 00 00", "dim"),
            (1, "NAMELEN", f"Name length {name_len}", "magenta"),
            (name_len, "NAME", f"Name {track.name!r}", "green"),
            (SpliceOffsets.STEPS_LENGTH, "STEPS", f"{track.active_steps} active steps", "red"),
        ]
        for length, name, desc, color in fields:
            if length:
                regions.append((base, base + length, f"{tag}.{name}", desc, color))
            base += length

    if analysis.trailing_bytes:
        if analysis.stop_reason == STOP_CORRUPT:
            desc = "Corrupted record and everything after"
        else:
            desc = "Not decoded"
        regions.append((analysis.stop_offset, size, "IGNORED", desc, "bold red"))

    return regions


def format_chunk(chunk: bytes, width: int) -> Text:
    """Format bytes as hex plus ASCII, padding short chunks."""
    text = Text()
    for byte in chunk:
        text.append(f"{byte:02X} ", style="dim" if byte == 0x00 else "bold white")
    text.append("   " * (width - len(chunk)))
    text.append(" ")
    for byte in chunk:
        if 32 <= byte < 127:
            text.append(chr(byte), style="green")
        else:
            text.append(".", style="dim")
    return text


@app.command()
def dump(
    file: Path = typer.Argument(..., help=".splice file to dump"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    region: str = typer.Option(
        "", "--region", "-r", help="Show only regions whose name starts with this (e.g. T0, TEMPO)"
    ),
) -> None:
    """
    Annotated hex dump of a .splice pattern file.

    Every header field and every track record field is shown on its own
    rows, followed by any bytes the decoder ignores.

    Examples:

        splicedrum dump pattern_1.splice

        splicedrum dump pattern_1.splice --region T2
    """
    if not file.is_file():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    if width < 1:
        console.print(f"[red]Error: Invalid width: {width}[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        data = f.read()

    analysis = SpliceAnalyzer().analyze_bytes(data, str(file))
    regions = build_regions(analysis)

    if region:
        wanted = region.upper()
        regions = [r for r in regions if r[2].startswith(wanted)]
        if not regions:
            console.print(f"[red]Unknown region: {region}[/red]")
            raise typer.Exit(1)

    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(str(file))}\n"
            f"[bold]Size:[/bold] {len(data)} bytes\n"
            f"[bold]Tracks:[/bold] {len(analysis.tracks)}\n"
            f"[bold]Stopped:[/bold] {stop_reason_text(analysis.stop_reason)} at 0x{analysis.stop_offset:X}",
            title="[bold]Splice Hex Dump[/bold]",
            border_style="blue",
        )
    )

    header = Text()
    header.append("OFFSET ", style="dim")
    header.append(f"{'REGION':12s} ", style="dim")
    header.append(" ".join(f"{i:02X}" for i in range(width)), style="dim")
    header.append("  ASCII", style="dim")
    console.print(header, soft_wrap=True)
    console.print("─" * (7 + 13 + width * 3 + 1 + width), soft_wrap=True)

    for start, end, name, desc, color in regions:
        for offset in range(start, end, width):
            chunk = data[offset : min(offset + width, end)]
            first = offset == start

            line = Text()
            line.append(f"0x{offset:04X} ", style="dim")
            line.append(f"{name if first else '':12s} ", style=color)
            line.append(format_chunk(chunk, width))
            if first:
                line.append(f"  {desc}", style="dim")
            console.print(line, soft_wrap=True)


if __name__ == "__main__":
    app()
