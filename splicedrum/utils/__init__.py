"""Utility functions for splicedrum."""

from splicedrum.utils.validation import (
    FormatError,
    MissingSignatureError,
    TruncatedError,
    decode_text,
    has_signature,
)

__all__ = [
    "FormatError",
    "MissingSignatureError",
    "TruncatedError",
    "decode_text",
    "has_signature",
]
