"""
Pattern data model - the decoded contents of a .splice file.
"""

import math
import struct
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from splicedrum.models.track import TrackRecord


def format_tempo(tempo: float) -> str:
    """
    Format a float32 tempo in its shortest form.

    Uses the fewest significant digits that read back to the same
    32-bit value, so 120.0 prints as "120" and 98.4 as "98.4".
    Exponent notation kicks in below 1e-4 and from 1e6 upward.

    Args:
        tempo: Tempo as decoded from the file

    Returns:
        Tempo text
    """
    if math.isnan(tempo):
        return "NaN"
    if math.isinf(tempo):
        return "+Inf" if tempo > 0 else "-Inf"
    if tempo == 0:
        return "-0" if math.copysign(1.0, tempo) < 0 else "0"

    target = struct.pack("<f", tempo)
    for digits in range(1, 10):
        text = f"{tempo:.{digits - 1}e}"
        try:
            packed = struct.pack("<f", float(text))
        except OverflowError:
            # Rounded up past the float32 range
            continue
        if packed == target:
            break

    exponent = int(text.split("e")[1])
    if exponent < -4 or exponent >= 6:
        return text
    decimals = max(digits - 1 - exponent, 0)
    return f"{float(text):.{decimals}f}"


@dataclass(frozen=True)
class Pattern:
    """
    Decoded drum pattern.

    A Pattern is built once by the decoder and never changes.

    Attributes:
        version: Hardware version text the file was saved with
        tempo: Tempo in BPM (float32, not range-checked)
        tracks: Track records in file order
    """

    version: str = ""
    tempo: float = 0.0
    tracks: Tuple[TrackRecord, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "tracks", tuple(self.tracks))

    def __iter__(self) -> Iterator[TrackRecord]:
        return iter(self.tracks)

    def __len__(self) -> int:
        return len(self.tracks)

    def get_tracks_by_id(self, track_id: int) -> List[TrackRecord]:
        """Get all tracks carrying an id (ids are not unique)."""
        return [t for t in self.tracks if t.id == track_id]

    def to_text(self) -> str:
        """
        Render the pattern for display.

        Returns:
            Version line, tempo line, then one line per track:

                Saved with HW Version: 0.808-alpha
                Tempo: 120
                (0) kick	|x---|x---|x---|x---|
        """
        lines = [
            f"Saved with HW Version: {self.version}",
            f"Tempo: {format_tempo(self.tempo)}",
        ]
        lines.extend(track.to_line() for track in self.tracks)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_text()
