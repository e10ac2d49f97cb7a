"""
splicedrum - Decoder for .splice drum machine pattern files.

This library provides tools to:
- Decode .splice files into immutable Pattern objects
- Render patterns as text step grids
- Analyze file structure, including corrupted tails
- Export patterns to Standard MIDI Files

Example usage:
    from splicedrum import decode_file

    pattern = decode_file("pattern_1.splice")
    print(pattern.to_text())
"""

from pathlib import Path
from typing import Union

__version__ = "0.1.0"
__author__ = "splicedrum Contributors"

from splicedrum.formats.splice.decoder import decode, decode_bytes
from splicedrum.formats.splice.reader import SpliceReader
from splicedrum.formats.splice.source import ByteSource, BytesSource, open_source
from splicedrum.models.pattern import Pattern
from splicedrum.models.track import TrackRecord, render_steps
from splicedrum.utils.validation import FormatError, MissingSignatureError, TruncatedError


def decode_file(filepath: Union[str, Path]) -> Pattern:
    """
    Decode the .splice file at ``filepath``.

    Raises:
        FileNotFoundError: If the file does not exist
        FormatError: If the file cannot be decoded
    """
    return decode(open_source(filepath))


__all__ = [
    "ByteSource",
    "BytesSource",
    "FormatError",
    "MissingSignatureError",
    "Pattern",
    "SpliceReader",
    "TrackRecord",
    "TruncatedError",
    "decode",
    "decode_bytes",
    "decode_file",
    "open_source",
    "render_steps",
]
