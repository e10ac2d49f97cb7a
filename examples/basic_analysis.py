#!/usr/bin/env python3
"""
Example: Basic pattern analysis

Shows how to decode a .splice file and inspect its structure.

Usage:
    python basic_analysis.py pattern_1.splice
"""

import sys

from splicedrum import decode_file
from splicedrum.analysis import SpliceAnalyzer


def main():
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)

    filepath = sys.argv[1]

    # Decoded view, exactly what `splicedrum show` prints
    pattern = decode_file(filepath)
    print(pattern.to_text(), end="")
    print()

    # Structural view
    analysis = SpliceAnalyzer().analyze_file(filepath)
    print(f"File size: {analysis.filesize} bytes")
    print(f"Stopped: {analysis.stop_reason} at 0x{analysis.stop_offset:X}")
    print(f"Ignored bytes: {analysis.trailing_bytes}")
    print()

    print("Records:")
    for track in analysis.tracks:
        print(
            f"  #{track.index} id={track.id} {track.name!r}: "
            f"offset=0x{track.offset:X} size={track.size} active={track.active_steps}"
        )
    print()

    # Hex dump of header
    print("Version raw bytes:")
    print(" ".join(f"{b:02X}" for b in analysis.version_raw))


if __name__ == "__main__":
    main()
