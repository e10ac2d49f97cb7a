"""
Error types and header checks for .splice pattern data.
"""

from typing import Optional


class FormatError(ValueError):
    """Raised when data cannot be decoded as a .splice pattern."""

    pass


class MissingSignatureError(FormatError):
    """Raised when the SPLICE signature is absent from the file header."""

    def __init__(self, header: bytes):
        self.header = header
        super().__init__(f"Missing SPLICE signature (header: {header!r})")


class TruncatedError(FormatError):
    """
    Raised when a field runs past the end of the data.

    Attributes:
        field: Name of the field being read
        offset: Offset the read started at
        wanted: Number of bytes the field needs
        available: Number of bytes actually left
    """

    def __init__(self, field: str, offset: int, wanted: int, available: int):
        self.field = field
        self.offset = offset
        self.wanted = wanted
        self.available = available
        super().__init__(
            f"Truncated {field} at offset 0x{offset:X}: "
            f"need {wanted} bytes, {available} available"
        )


def has_signature(header: bytes, signature: bytes = b"SPLICE") -> bool:
    """
    Check whether a header block carries the format signature.

    The signature only has to be contained in the block, not start it.

    Args:
        header: Leading bytes of the file
        signature: Magic byte sequence

    Returns:
        True if the signature is present
    """
    return signature in header


def decode_text(raw: bytes, terminator: Optional[int] = 0x00) -> str:
    """
    Decode a raw text field.

    Every byte maps to one character (latin-1), so no input is ever rejected.
    When ``terminator`` is given the text is cut at its first occurrence.

    Args:
        raw: Field bytes
        terminator: Byte value ending the text, or None to keep everything

    Returns:
        Decoded text
    """
    if terminator is not None:
        end = raw.find(bytes([terminator]))
        if end != -1:
            raw = raw[:end]
    return raw.decode("latin-1")
