"""
Rich table displays for pattern information.

Provides formatted output for .splice file analysis.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from splicedrum.analysis.splice_analyzer import STOP_CORRUPT, SpliceAnalysis
from splicedrum.models.pattern import format_tempo

from cli.display.formatters import hex_bytes, step_grid, stop_reason_text, value_bar

console = Console()


def display_pattern_info(analysis: SpliceAnalysis, show_raw: bool = False) -> None:
    """Display .splice header information with Rich formatting."""

    status = "[green]Valid[/green]" if analysis.valid else "[red]Invalid[/red]"

    header_content = f"""[bold]File:[/bold] {escape(analysis.filepath)}
[bold]Status:[/bold] {status}
[bold]File Size:[/bold] {analysis.filesize} bytes
[bold]HW Version:[/bold] {escape(analysis.version) or "N/A"}
[bold]Tempo:[/bold] {format_tempo(analysis.tempo)} BPM
[bold]Tracks:[/bold] {len(analysis.tracks)}
[bold]Active Steps:[/bold] {analysis.total_active_steps}
[bold]Stopped At:[/bold] 0x{analysis.stop_offset:X} ({stop_reason_text(analysis.stop_reason)})"""

    if analysis.trailing_bytes:
        header_content += f"\n[bold]Ignored Bytes:[/bold] [yellow]{analysis.trailing_bytes}[/yellow]"

    console.print(
        Panel(
            header_content,
            title="[bold blue]Splice Pattern Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    if analysis.stop_reason == STOP_CORRUPT and analysis.corrupt_padding is not None:
        console.print(
            f"[yellow]Record at 0x{analysis.stop_offset:X} has padding "
            f"{hex_bytes(analysis.corrupt_padding)} (expected 00 00 00); "
            f"the rest of the file was ignored.[/yellow]"
        )

    if show_raw:
        raw_table = Table(title="Raw Header", box=box.SIMPLE, show_header=True, header_style="dim")
        raw_table.add_column("Field", style="cyan", width=10)
        raw_table.add_column("Bytes")
        raw_table.add_row("Signature", hex_bytes(analysis.signature_raw))
        raw_table.add_row("Version", hex_bytes(analysis.version_raw, limit=16))
        raw_table.add_row("Tempo", hex_bytes(analysis.tempo_raw))
        console.print(raw_table)


def display_tracks_table(analysis: SpliceAnalysis, show_offsets: bool = False) -> None:
    """Display all decoded tracks with their step grids."""

    if not analysis.tracks:
        console.print("[dim]No tracks[/dim]")
        return

    table = Table(title="Tracks", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right", width=4)
    table.add_column("Name", style="cyan")
    table.add_column("Steps", no_wrap=True)
    table.add_column("Active", no_wrap=True)
    if show_offsets:
        table.add_column("Offset", style="dim", no_wrap=True)

    for track in analysis.tracks:
        row = [
            str(track.id),
            Text(track.name),
            step_grid(track.steps),
            value_bar(track.active_steps, width=8),
        ]
        if show_offsets:
            row.append(f"0x{track.offset:X}")
        table.add_row(*row)

    console.print(table)
