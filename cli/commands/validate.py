"""
Validate command - check .splice file integrity and structure.
"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from splicedrum.analysis.splice_analyzer import (
    STOP_CORRUPT,
    STOP_END,
    STOP_NO_SIGNATURE,
    STOP_SHORT_HEADER,
    STOP_TRUNCATED,
    SpliceAnalysis,
    SpliceAnalyzer,
)
from splicedrum.formats.splice.decoder import SpliceOffsets
from splicedrum.models.pattern import format_tempo

from cli.display.formatters import hex_bytes

console = Console()
app = typer.Typer()


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str


@dataclass
class ValidationResult:
    """Result of validating a .splice file."""

    filepath: str
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    info: List[ValidationIssue] = field(default_factory=list)


class SpliceValidator:
    """
    Validate .splice file structure.

    Errors mean decode() fails; warnings flag data decode() accepts
    silently (corrupted tails, odd tempos, duplicate ids).
    """

    # Plausible tempo range for a warning, never enforced by the decoder
    USUAL_TEMPO_RANGE = (20.0, 300.0)

    def __init__(self, analysis: SpliceAnalysis):
        self.analysis = analysis
        self.issues: List[ValidationIssue] = []

    def validate(self) -> ValidationResult:
        """Perform full validation and return result."""
        self.issues = []

        self._validate_header()
        if self.analysis.valid:
            self._validate_tempo()
            self._validate_tracks()
            self._validate_end()

        errors = [i for i in self.issues if i.severity == "error"]
        warnings = [i for i in self.issues if i.severity == "warning"]
        info = [i for i in self.issues if i.severity == "info"]

        return ValidationResult(
            filepath=self.analysis.filepath,
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            info=info,
        )

    def _add_issue(self, severity: str, area: str, offset: int, message: str) -> None:
        self.issues.append(ValidationIssue(severity, area, offset, message))

    def _validate_header(self) -> None:
        """Check signature and header length."""
        if self.analysis.stop_reason == STOP_NO_SIGNATURE:
            self._add_issue(
                "error",
                "Signature",
                0,
                f"Missing SPLICE signature (found {hex_bytes(self.analysis.signature_raw)})",
            )
        elif self.analysis.stop_reason == STOP_SHORT_HEADER:
            self._add_issue("error", "Header", self.analysis.stop_offset, self.analysis.error)
        else:
            self._add_issue("info", "Signature", 0, "SPLICE signature present")
            self._add_issue(
                "info",
                "Version",
                SpliceOffsets.VERSION_OFFSET,
                f"Saved with HW version {self.analysis.version!r}",
            )

    def _validate_tempo(self) -> None:
        """Flag tempos no drum machine would use."""
        tempo = self.analysis.tempo
        low, high = self.USUAL_TEMPO_RANGE
        if math.isnan(tempo) or not low <= tempo <= high:
            self._add_issue(
                "warning",
                "Tempo",
                SpliceOffsets.TEMPO_OFFSET,
                f"Unusual tempo: {format_tempo(tempo)} BPM",
            )
        else:
            self._add_issue(
                "info", "Tempo", SpliceOffsets.TEMPO_OFFSET, f"Tempo is {format_tempo(tempo)} BPM"
            )

    def _validate_tracks(self) -> None:
        """Report track count and duplicate ids."""
        tracks = self.analysis.tracks
        self._add_issue("info", "Tracks", SpliceOffsets.HEADER_SIZE, f"{len(tracks)} tracks")

        seen = {}
        for track in tracks:
            if track.id in seen:
                self._add_issue(
                    "warning",
                    "Tracks",
                    track.offset,
                    f"Track id {track.id} repeats track #{seen[track.id]}",
                )
            else:
                seen[track.id] = track.index

    def _validate_end(self) -> None:
        """Check how the track loop ended."""
        reason = self.analysis.stop_reason
        offset = self.analysis.stop_offset

        if reason == STOP_CORRUPT:
            padding = self.analysis.corrupt_padding or b""
            self._add_issue(
                "warning",
                "Corruption",
                offset,
                f"Record padding is {hex_bytes(padding)}, not 00 00 00; "
                f"{self.analysis.trailing_bytes} bytes ignored",
            )
        elif reason == STOP_TRUNCATED:
            self._add_issue("error", "Truncated", offset, self.analysis.error)
        elif reason == STOP_END:
            self._add_issue("info", "End", offset, "Track records end exactly at end of file")


def display_validation(result: ValidationResult, verbose: bool = False) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(result.filepath)}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Errors: [red]{len(result.errors)}[/red]  "
            f"Warnings: [yellow]{len(result.warnings)}[/yellow]  "
            f"Info: [blue]{len(result.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if result.errors or result.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=10)
        table.add_column("Area", style="cyan", width=12)
        table.add_column("Offset", style="dim", width=8)
        table.add_column("Message", width=40)

        for issue in result.errors:
            table.add_row("[red]ERROR[/red]", issue.area, f"0x{issue.offset:X}", escape(issue.message))

        for issue in result.warnings:
            table.add_row(
                "[yellow]WARN[/yellow]", issue.area, f"0x{issue.offset:X}", escape(issue.message)
            )

        console.print(table)

    if result.info and (verbose or (not result.errors and not result.warnings)):
        info_table = Table(title="Validation Checks", box=box.SIMPLE, show_header=False)
        info_table.add_column("", width=60)

        for issue in result.info:
            info_table.add_row(f"[green]OK[/green] {issue.area}: {escape(issue.message)}")

        console.print(info_table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help=".splice file to validate"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show all validation details"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate a .splice pattern file.

    Checks for:

    - SPLICE signature and complete header
    - Records running past end of file
    - Corrupted records that silently cut the track list short
    - Unusual tempos and repeated track ids

    Examples:

        splicedrum validate pattern_1.splice

        splicedrum validate pattern_5.splice --strict
    """
    if not file.is_file():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    analysis = SpliceAnalyzer().analyze_file(file)
    result = SpliceValidator(analysis).validate()

    if strict and result.warnings:
        result.valid = False

    display_validation(result, verbose=verbose)

    if not result.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
