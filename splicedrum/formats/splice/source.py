"""
Byte sources consumed by the .splice decoder.

The decoder only needs random-access reads and the total length, so
anything implementing :class:`ByteSource` can be decoded: in-memory
bytes, an open binary file, or a memory map.
"""

import os
from pathlib import Path
from typing import BinaryIO, Protocol, Union


class ByteSource(Protocol):
    """Random-access byte sequence with a known length."""

    def read_at(self, offset: int, length: int) -> bytes:
        """Return up to ``length`` bytes starting at ``offset``."""
        ...

    def length(self) -> int:
        """Return the total number of bytes."""
        ...


class BytesSource:
    """ByteSource over an in-memory buffer."""

    def __init__(self, data: bytes):
        self._data = bytes(data)

    def read_at(self, offset: int, length: int) -> bytes:
        return self._data[offset : offset + length]

    def length(self) -> int:
        return len(self._data)


class FileSource:
    """
    ByteSource over an open binary file.

    The length is taken once from the file descriptor when the source
    is created; the file must not grow or shrink while decoding.
    """

    def __init__(self, fileobj: BinaryIO):
        self._file = fileobj
        self._length = os.fstat(fileobj.fileno()).st_size

    def read_at(self, offset: int, length: int) -> bytes:
        self._file.seek(offset)
        return self._file.read(length)

    def length(self) -> int:
        return self._length


def open_source(filepath: Union[str, Path]) -> BytesSource:
    """
    Open a file as a ByteSource.

    The file is read whole and closed before returning.

    Args:
        filepath: Path to the file

    Returns:
        In-memory ByteSource with the file contents

    Raises:
        FileNotFoundError: If the file does not exist
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, "rb") as f:
        return BytesSource(f.read())
