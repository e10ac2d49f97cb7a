"""Test configuration and fixtures."""

import struct
from typing import Sequence, Tuple

import pytest

KICK_STEPS = (1, 0, 0, 0) * 4
SNARE_STEPS = (0, 0, 0, 0, 1, 0, 0, 0) * 2
HAT_STEPS = (1, 0) * 8

# (id, name, steps)
DEFAULT_TRACKS = [
    (0, b"kick", KICK_STEPS),
    (1, b"snare", SNARE_STEPS),
    (3, b"hh-close", HAT_STEPS),
]


def encode_track(track_id: int, name: bytes, steps: Sequence[int], padding: bytes = b"\x00\x00\x00") -> bytes:
    """Encode one track record."""
    return bytes([track_id]) + padding + bytes([len(name)]) + name + bytes(steps)


def encode_splice(
    version: bytes = b"0.808-alpha",
    tempo: float = 120.0,
    tracks: Sequence[Tuple[int, bytes, Sequence[int]]] = (),
    signature: bytes = b"SPLICE",
) -> bytes:
    """Encode a complete .splice file."""
    data = signature + version.ljust(32, b"\x00")[:32] + struct.pack("<f", tempo)
    for track_id, name, steps in tracks:
        data += encode_track(track_id, name, steps)
    return data


@pytest.fixture
def build_splice():
    """Return the .splice byte builder."""
    return encode_splice


@pytest.fixture
def build_track():
    """Return the track record byte builder."""
    return encode_track


@pytest.fixture
def splice_data():
    """Return a well-formed pattern with three tracks."""
    return encode_splice(tracks=DEFAULT_TRACKS)


@pytest.fixture
def empty_splice_data():
    """Return a well-formed pattern with no tracks."""
    return encode_splice(version=b"0.909", tempo=98.4)


@pytest.fixture
def corrupt_splice_data():
    """Return two good tracks followed by a record with bad padding."""
    good = encode_splice(tracks=DEFAULT_TRACKS[:2])
    bad = encode_track(9, b"ghost", KICK_STEPS, padding=b"\x00\x01\x00")
    return good + bad + encode_track(4, b"clap", HAT_STEPS)


@pytest.fixture
def splice_file(tmp_path, splice_data):
    """Return path to a well-formed .splice file."""
    path = tmp_path / "pattern_1.splice"
    path.write_bytes(splice_data)
    return path


@pytest.fixture
def corrupt_splice_file(tmp_path, corrupt_splice_data):
    """Return path to a .splice file with a corrupted tail."""
    path = tmp_path / "pattern_5.splice"
    path.write_bytes(corrupt_splice_data)
    return path
