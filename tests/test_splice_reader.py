"""Tests for .splice file reading and byte sources."""

import pytest

from splicedrum import MissingSignatureError, SpliceReader, decode_file
from splicedrum.formats.splice.decoder import decode
from splicedrum.formats.splice.source import BytesSource, FileSource, open_source


class TestByteSources:
    """Test cases for ByteSource implementations."""

    def test_bytes_source(self):
        source = BytesSource(b"SPLICE")

        assert source.length() == 6
        assert source.read_at(2, 3) == b"LIC"
        assert source.read_at(5, 10) == b"E"
        assert source.read_at(10, 1) == b""

    def test_file_source(self, splice_file, splice_data):
        with open(splice_file, "rb") as f:
            source = FileSource(f)

            assert source.length() == len(splice_data)
            assert source.read_at(0, 6) == b"SPLICE"
            assert source.read_at(38, 4) == splice_data[38:42]

    def test_decode_file_source(self, splice_file):
        with open(splice_file, "rb") as f:
            pattern = decode(FileSource(f))

        assert [t.name for t in pattern.tracks] == ["kick", "snare", "hh-close"]

    def test_open_source(self, splice_file, splice_data):
        source = open_source(splice_file)

        assert source.length() == len(splice_data)

    def test_open_source_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            open_source(tmp_path / "missing.splice")


class TestDecodeFile:
    """Test cases for path-based decoding."""

    def test_decode_file(self, splice_file):
        pattern = decode_file(splice_file)

        assert pattern.version == "0.808-alpha"
        assert pattern.tempo == 120.0
        assert len(pattern.tracks) == 3

    def test_decode_file_str_path(self, splice_file):
        assert decode_file(str(splice_file)) == decode_file(splice_file)

    def test_decode_file_not_splice(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_bytes(b"hello world, not a drum pattern")

        with pytest.raises(MissingSignatureError):
            decode_file(path)


class TestSpliceReader:
    """Test cases for SpliceReader."""

    def test_read(self, splice_file):
        pattern = SpliceReader.read(splice_file)

        assert pattern.to_text().startswith("Saved with HW Version: 0.808-alpha\nTempo: 120\n")

    def test_parse_bytes(self, corrupt_splice_data):
        pattern = SpliceReader().parse_bytes(corrupt_splice_data)

        assert [t.name for t in pattern.tracks] == ["kick", "snare"]

    def test_parse_file_reuses_reader(self, splice_file, corrupt_splice_file):
        reader = SpliceReader()

        first = reader.parse_file(splice_file)
        second = reader.parse_file(corrupt_splice_file)

        assert len(first.tracks) == 3
        assert len(second.tracks) == 2
        assert vars(reader) == {}

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SpliceReader.read(tmp_path / "missing.splice")

    def test_can_read(self, splice_file, tmp_path):
        other = tmp_path / "other.bin"
        other.write_bytes(b"MThd\x00\x00\x00\x06")

        assert SpliceReader.can_read(splice_file) is True
        assert SpliceReader.can_read(other) is False
        assert SpliceReader.can_read(tmp_path / "missing.splice") is False
        assert SpliceReader.can_read(tmp_path) is False

    def test_get_file_info(self, splice_file, splice_data):
        info = SpliceReader.get_file_info(splice_file)

        assert info["valid"] is True
        assert info["size"] == len(splice_data)
        assert info["header"] == "SPLICE"
        assert info["version"] == "0.808-alpha"
        assert info["tempo"] == 120.0
        assert info["track_bytes"] == len(splice_data) - 42

    def test_get_file_info_invalid(self, tmp_path):
        path = tmp_path / "bad.splice"
        path.write_bytes(b"SPLICE0.8")

        info = SpliceReader.get_file_info(path)

        assert info["valid"] is False
        assert "Truncated" in info["error"]
