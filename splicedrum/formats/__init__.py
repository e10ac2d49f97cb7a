"""Format handlers for .splice files."""

from splicedrum.formats.splice import SpliceReader, decode, decode_bytes

__all__ = ["SpliceReader", "decode", "decode_bytes"]
