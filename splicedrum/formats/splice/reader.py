"""
.splice file reader.

Opens .splice files by path and decodes them into Pattern objects.
"""

from pathlib import Path
from typing import Union

from splicedrum.formats.splice.decoder import FieldReader, HeaderParser, SpliceOffsets, decode
from splicedrum.formats.splice.source import BytesSource, FileSource, open_source
from splicedrum.models.pattern import Pattern
from splicedrum.utils.validation import FormatError, has_signature


class SpliceReader:
    """
    Reader for .splice drum pattern files.

    Example:
        pattern = SpliceReader.read("pattern_1.splice")
        print(pattern.to_text())
    """

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Pattern:
        """
        Read a .splice file and return a Pattern.

        Args:
            filepath: Path to .splice file

        Returns:
            Decoded Pattern
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Pattern:
        """
        Parse a .splice file.

        Raises:
            FileNotFoundError: If the file does not exist
            FormatError: If the file cannot be decoded
        """
        return decode(open_source(filepath))

    def parse_bytes(self, data: bytes) -> Pattern:
        """Parse .splice data from bytes."""
        return decode(BytesSource(data))

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file carries the .splice signature.

        Args:
            filepath: Path to check

        Returns:
            True if the signature is present
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(SpliceOffsets.SIGNATURE_LENGTH)
        except OSError:
            return False

        return has_signature(header, SpliceOffsets.SIGNATURE)

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get header information about a .splice file without reading tracks.

        Args:
            filepath: Path to .splice file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            source = FileSource(f)
            info = {
                "valid": False,
                "size": source.length(),
                "header": source.read_at(0, SpliceOffsets.SIGNATURE_LENGTH).decode(
                    "ascii", errors="replace"
                ),
            }

            try:
                header = HeaderParser(FieldReader(source)).parse()
            except FormatError as e:
                info["error"] = str(e)
                return info

        info["valid"] = True
        info["version"] = header.version
        info["tempo"] = header.tempo
        info["track_bytes"] = max(info["size"] - SpliceOffsets.HEADER_SIZE, 0)
        return info
