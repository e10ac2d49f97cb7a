"""
.splice drum pattern decoder.

File Structure (all integers little-endian):
    0x00-0x05: Signature, must contain "SPLICE"
    0x06-0x25: Version text, zero-padded (32 bytes)
    0x26-0x29: Tempo, float32
    0x2A-...:  Track records until end of data

Track record:
    +0        id (1 byte)
    +1        padding, must be 00 00 00 (3 bytes)
    +4        name length n (1 byte)
    +5        name (n bytes)
    +5+n      steps, 1 = active (16 bytes)

Corrupted files:
    A record whose padding is not 00 00 00 ends the track list. Decoding
    stops there WITHOUT raising: the tracks read so far are returned and
    the rest of the file is ignored. A clean end and a corrupted tail look
    the same to the caller of :func:`decode`; use
    :class:`~splicedrum.analysis.SpliceAnalyzer` to tell them apart.

    A record that runs past the end of the data raises TruncatedError.
"""

import logging
import struct
from dataclasses import dataclass
from typing import List, Optional

from splicedrum.formats.splice.source import ByteSource, BytesSource
from splicedrum.models.pattern import Pattern
from splicedrum.models.track import STEP_COUNT, TrackRecord
from splicedrum.utils.validation import (
    MissingSignatureError,
    TruncatedError,
    decode_text,
    has_signature,
)

LOGGER = logging.getLogger(__name__)


class SpliceOffsets:
    """
    Field sizes and offsets of the .splice layout.
    """

    # Header
    SIGNATURE = b"SPLICE"
    SIGNATURE_LENGTH = 6
    VERSION_LENGTH = 32
    TEMPO_LENGTH = 4
    TEMPO_FORMAT = "<f"

    VERSION_OFFSET = SIGNATURE_LENGTH  # 0x06
    TEMPO_OFFSET = VERSION_OFFSET + VERSION_LENGTH  # 0x26
    HEADER_SIZE = TEMPO_OFFSET + TEMPO_LENGTH  # 0x2A

    # Track record
    TRACK_ID_LENGTH = 1
    PADDING_LENGTH = 3
    PADDING = b"\x00\x00\x00"
    NAME_LENGTH_LENGTH = 1
    STEPS_LENGTH = STEP_COUNT
    RECORD_FIXED_SIZE = TRACK_ID_LENGTH + PADDING_LENGTH + NAME_LENGTH_LENGTH + STEPS_LENGTH


class FieldReader:
    """
    Sequential fixed-length reads over a ByteSource.

    Keeps the read cursor; every read advances it by the bytes consumed.
    """

    def __init__(self, source: ByteSource, offset: int = 0):
        self.source = source
        self.offset = offset
        self.size = source.length()

    @property
    def remaining(self) -> int:
        """Bytes left after the cursor."""
        return max(self.size - self.offset, 0)

    @property
    def at_end(self) -> bool:
        return self.offset >= self.size

    def read(self, length: int, name: str = "field") -> bytes:
        """
        Read exactly ``length`` bytes.

        Raises:
            TruncatedError: If fewer than ``length`` bytes remain
        """
        if length > self.remaining:
            raise TruncatedError(name, self.offset, length, self.remaining)
        data = self.source.read_at(self.offset, length)
        if len(data) != length:
            raise TruncatedError(name, self.offset, length, len(data))
        self.offset += length
        return data

    def read_available(self, length: int) -> bytes:
        """Read up to ``length`` bytes, fewer at end of data."""
        data = self.source.read_at(self.offset, min(length, self.remaining))
        self.offset += len(data)
        return data

    def read_byte(self, name: str = "field") -> int:
        return self.read(1, name)[0]


@dataclass
class SpliceHeader:
    """Decoded header fields plus their raw bytes."""

    signature: bytes
    version: str
    tempo: float
    version_raw: bytes = b""
    tempo_raw: bytes = b""


class HeaderParser:
    """Validates the signature and reads version and tempo."""

    def __init__(self, reader: FieldReader):
        self.reader = reader

    def parse(self) -> SpliceHeader:
        """
        Parse the 42-byte header.

        Returns:
            SpliceHeader with version and tempo

        Raises:
            MissingSignatureError: If "SPLICE" is not in the first 6 bytes
            TruncatedError: If version or tempo run past end of data
        """
        signature = self.reader.read_available(SpliceOffsets.SIGNATURE_LENGTH)
        if not has_signature(signature, SpliceOffsets.SIGNATURE):
            raise MissingSignatureError(signature)

        version_raw = self.reader.read(SpliceOffsets.VERSION_LENGTH, "version")
        tempo_raw = self.reader.read(SpliceOffsets.TEMPO_LENGTH, "tempo")
        (tempo,) = struct.unpack(SpliceOffsets.TEMPO_FORMAT, tempo_raw)

        header = SpliceHeader(
            signature=signature,
            version=decode_text(version_raw),
            tempo=tempo,
            version_raw=version_raw,
            tempo_raw=tempo_raw,
        )
        LOGGER.debug("Header: version=%r tempo=%r", header.version, header.tempo)
        return header


class TrackParser:
    """
    Reads track records until end of data or a corruption marker.

    After :meth:`parse` returns, ``corrupt_offset`` and ``corrupt_padding``
    describe where and why the loop stopped early (both None on a clean end).
    """

    def __init__(self, reader: FieldReader):
        self.reader = reader
        self.corrupt_offset: Optional[int] = None
        self.corrupt_padding: Optional[bytes] = None

    @property
    def corrupted(self) -> bool:
        return self.corrupt_offset is not None

    def read_record(self) -> Optional[TrackRecord]:
        """
        Read one track record at the cursor.

        Returns:
            The record, or None if its padding marks the file as corrupted

        Raises:
            TruncatedError: If the record runs past end of data
        """
        start = self.reader.offset
        track_id = self.reader.read_byte("track id")

        padding = self.reader.read_available(SpliceOffsets.PADDING_LENGTH)
        if padding != SpliceOffsets.PADDING[: len(padding)]:
            self.corrupt_offset = start
            self.corrupt_padding = padding
            LOGGER.debug(
                "Corrupted track record at 0x%X (padding %s), stopping",
                start,
                padding.hex(" "),
            )
            return None
        if len(padding) < SpliceOffsets.PADDING_LENGTH:
            raise TruncatedError(
                "track padding", start + 1, SpliceOffsets.PADDING_LENGTH, len(padding)
            )

        name_length = self.reader.read_byte("track name length")
        name = decode_text(self.reader.read(name_length, "track name"), terminator=None)
        raw_steps = self.reader.read(SpliceOffsets.STEPS_LENGTH, "track steps")

        record = TrackRecord.from_step_bytes(track_id, name, raw_steps)
        LOGGER.debug("Track at 0x%X: (%d) %s", start, record.id, record.name)
        return record

    def parse(self) -> List[TrackRecord]:
        """Read all track records in file order."""
        tracks: List[TrackRecord] = []
        while not self.reader.at_end:
            record = self.read_record()
            if record is None:
                break
            tracks.append(record)
        return tracks


def decode(source: ByteSource) -> Pattern:
    """
    Decode a .splice pattern from a byte source.

    Args:
        source: Random-access byte source, read from offset 0

    Returns:
        Decoded Pattern (possibly with fewer tracks if the file is corrupted)

    Raises:
        MissingSignatureError: If the data is not a .splice file
        TruncatedError: If a field runs past end of data
    """
    reader = FieldReader(source)
    header = HeaderParser(reader).parse()
    tracks = TrackParser(reader).parse()
    return Pattern(version=header.version, tempo=header.tempo, tracks=tuple(tracks))


def decode_bytes(data: bytes) -> Pattern:
    """Decode a .splice pattern from raw bytes."""
    return decode(BytesSource(data))
