"""
Display formatting utilities for CLI output.

Provides step grids, bar graphics and byte formatting helpers.
"""

from typing import Optional, Sequence

from rich.text import Text

from splicedrum.analysis.splice_analyzer import (
    STOP_CORRUPT,
    STOP_END,
    STOP_NO_SIGNATURE,
    STOP_SHORT_HEADER,
    STOP_TRUNCATED,
)
from splicedrum.models.track import STEP_COUNT, STEPS_PER_GROUP


def value_bar(
    value: int,
    max_value: int = STEP_COUNT,
    width: int = 16,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
    show_percent: bool = True,
) -> str:
    """
    Create a text-based bar graphic with value and percentage.

    Args:
        value: Current value
        max_value: Maximum value (default 16 steps)
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_value: Show numeric value
        show_percent: Show percentage

    Returns:
        Formatted string like " 4 [████░░░░░░░░░░░░]  25%"
    """
    if max_value <= 0:
        max_value = 1

    clamped = max(0, min(value, max_value))

    fill_count = int((clamped / max_value) * width)
    empty_count = width - fill_count

    bar = filled_char * fill_count + empty_char * empty_count
    percent = int((clamped / max_value) * 100)

    parts = []
    if show_value:
        parts.append(f"{value:2d}")
    parts.append(f"[{bar}]")
    if show_percent:
        parts.append(f"{percent:3d}%")

    return " ".join(parts)


def step_grid(
    steps: Sequence[bool],
    active_style: str = "bold green",
    inactive_style: str = "dim",
    bar_style: str = "cyan",
) -> Text:
    """
    Create a colored step grid like |x---|x---|x---|x---|.

    Same characters as Pattern.to_text(), with Rich styles applied.
    """
    text = Text()
    text.append("|", style=bar_style)
    for index, active in enumerate(steps):
        if active:
            text.append("x", style=active_style)
        else:
            text.append("-", style=inactive_style)
        if index % STEPS_PER_GROUP == STEPS_PER_GROUP - 1:
            text.append("|", style=bar_style)
    return text


def hex_bytes(data: bytes, limit: Optional[int] = None) -> str:
    """
    Format bytes as space-separated hex.

    Returns:
        "53 50 4C 49 43 45" or "00 00 ... (+24)" when cut at ``limit``
    """
    if limit is not None and len(data) > limit:
        shown = " ".join(f"{b:02X}" for b in data[:limit])
        return f"{shown} ... (+{len(data) - limit})"
    return " ".join(f"{b:02X}" for b in data)


def stop_reason_text(reason: str) -> str:
    """
    Format a track loop stop reason for display.

    Returns:
        Rich markup like "[green]end of data[/green]"
    """
    labels = {
        STOP_END: "[green]end of data[/green]",
        STOP_CORRUPT: "[yellow]corrupted record[/yellow]",
        STOP_TRUNCATED: "[red]truncated record[/red]",
        STOP_NO_SIGNATURE: "[red]missing signature[/red]",
        STOP_SHORT_HEADER: "[red]truncated header[/red]",
    }
    return labels.get(reason, reason)
