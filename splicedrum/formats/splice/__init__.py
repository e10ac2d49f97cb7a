""".splice format handlers."""

from splicedrum.formats.splice.decoder import (
    FieldReader,
    HeaderParser,
    SpliceHeader,
    SpliceOffsets,
    TrackParser,
    decode,
    decode_bytes,
)
from splicedrum.formats.splice.reader import SpliceReader
from splicedrum.formats.splice.source import ByteSource, BytesSource, FileSource, open_source

__all__ = [
    "ByteSource",
    "BytesSource",
    "FileSource",
    "FieldReader",
    "HeaderParser",
    "SpliceHeader",
    "SpliceOffsets",
    "SpliceReader",
    "TrackParser",
    "decode",
    "decode_bytes",
    "open_source",
]
