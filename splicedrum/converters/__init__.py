"""
Pattern converters.

Example:
    from splicedrum import decode_file
    from splicedrum.converters import convert_splice_to_midi

    convert_splice_to_midi(decode_file("pattern_1.splice"), "pattern_1.mid", bars=4)
"""

from splicedrum.converters.splice_to_midi import (
    GM_DRUM_NOTES,
    SpliceToMidiConverter,
    convert_splice_to_midi,
    drum_note,
)

__all__ = [
    "GM_DRUM_NOTES",
    "SpliceToMidiConverter",
    "convert_splice_to_midi",
    "drum_note",
]
