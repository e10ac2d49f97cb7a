"""
.splice file analyzer.

Walks a .splice file with the same parsers the decoder uses, but never
raises on bad data. Records where every track record sits and why the
track loop stopped, which the plain decoder deliberately hides:
- clean end of data
- corrupted record (padding not 00 00 00)
- record running past end of data
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from splicedrum.formats.splice.decoder import (
    FieldReader,
    HeaderParser,
    SpliceOffsets,
    TrackParser,
)
from splicedrum.formats.splice.source import BytesSource
from splicedrum.utils.validation import MissingSignatureError, TruncatedError

STOP_END = "end"
STOP_CORRUPT = "corrupt"
STOP_TRUNCATED = "truncated"
STOP_NO_SIGNATURE = "no-signature"
STOP_SHORT_HEADER = "short-header"


@dataclass
class TrackInfo:
    """Location and contents of one decoded track record."""

    index: int
    offset: int
    size: int
    id: int
    name: str
    steps: Tuple[bool, ...]
    active_steps: int = 0


@dataclass
class SpliceAnalysis:
    """Complete .splice file analysis result."""

    # File info
    filepath: str
    filesize: int
    valid: bool

    # Header
    signature_raw: bytes = b""
    version: str = ""
    version_raw: bytes = b""
    tempo: float = 0.0
    tempo_raw: bytes = b""

    # Track records
    tracks: List[TrackInfo] = field(default_factory=list)

    # Where and why decoding stopped
    stop_reason: str = STOP_END
    stop_offset: int = 0
    trailing_bytes: int = 0
    corrupt_padding: Optional[bytes] = None
    error: str = ""

    @property
    def decodable(self) -> bool:
        """True if decode() returns a Pattern for this data."""
        return self.stop_reason in (STOP_END, STOP_CORRUPT)

    @property
    def total_active_steps(self) -> int:
        return sum(t.active_steps for t in self.tracks)


class SpliceAnalyzer:
    """
    Structural analyzer for .splice files.

    Example:
        analysis = SpliceAnalyzer().analyze_file("pattern_5.splice")
        if analysis.stop_reason == "corrupt":
            print(f"Corrupted after {len(analysis.tracks)} tracks")
    """

    def __init__(self):
        self.data: bytes = b""

    def analyze_file(self, filepath: Union[str, Path]) -> SpliceAnalysis:
        """Analyze a .splice file."""
        path = Path(filepath)

        with open(path, "rb") as f:
            self.data = f.read()

        return self._analyze(str(path))

    def analyze_bytes(self, data: bytes, name: str = "memory") -> SpliceAnalysis:
        """Analyze .splice data from bytes."""
        self.data = data
        return self._analyze(name)

    def _analyze(self, filepath: str) -> SpliceAnalysis:
        reader = FieldReader(BytesSource(self.data))
        analysis = SpliceAnalysis(filepath=filepath, filesize=len(self.data), valid=False)

        try:
            header = HeaderParser(reader).parse()
        except MissingSignatureError as e:
            analysis.signature_raw = e.header
            return self._stop(analysis, STOP_NO_SIGNATURE, 0, str(e))
        except TruncatedError as e:
            analysis.signature_raw = self.data[: SpliceOffsets.SIGNATURE_LENGTH]
            return self._stop(analysis, STOP_SHORT_HEADER, e.offset, str(e))

        analysis.valid = True
        analysis.signature_raw = header.signature
        analysis.version = header.version
        analysis.version_raw = header.version_raw
        analysis.tempo = header.tempo
        analysis.tempo_raw = header.tempo_raw

        parser = TrackParser(reader)
        while not reader.at_end:
            start = reader.offset
            try:
                record = parser.read_record()
            except TruncatedError as e:
                return self._stop(analysis, STOP_TRUNCATED, start, str(e))

            if record is None:
                analysis.corrupt_padding = parser.corrupt_padding
                return self._stop(analysis, STOP_CORRUPT, start)

            analysis.tracks.append(
                TrackInfo(
                    index=len(analysis.tracks),
                    offset=start,
                    size=reader.offset - start,
                    id=record.id,
                    name=record.name,
                    steps=record.steps,
                    active_steps=record.active_steps,
                )
            )

        return self._stop(analysis, STOP_END, reader.offset)

    def _stop(
        self, analysis: SpliceAnalysis, reason: str, offset: int, error: str = ""
    ) -> SpliceAnalysis:
        analysis.stop_reason = reason
        analysis.stop_offset = offset
        analysis.trailing_bytes = max(len(self.data) - offset, 0)
        analysis.error = error
        return analysis
