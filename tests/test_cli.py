"""Tests for the splicedrum CLI."""

import logging
import struct

import mido
import pytest
from typer.testing import CliRunner

from cli.app import app
from splicedrum import __version__

from conftest import KICK_STEPS, encode_splice

runner = CliRunner()


@pytest.fixture
def not_splice_file(tmp_path):
    path = tmp_path / "song.mid"
    path.write_bytes(b"MThd\x00\x00\x00\x06\x00\x01\x00\x02\x01\xe0")
    return path


class TestShow:
    def test_show(self, splice_file):
        result = runner.invoke(app, ["show", str(splice_file)])

        assert result.exit_code == 0
        assert result.stdout == (
            "Saved with HW Version: 0.808-alpha\n"
            "Tempo: 120\n"
            "(0) kick\t|x---|x---|x---|x---|\n"
            "(1) snare\t|----|x---|----|x---|\n"
            "(3) hh-close\t|x-x-|x-x-|x-x-|x-x-|\n"
        )

    def test_show_corrupt_file_is_silent(self, corrupt_splice_file):
        result = runner.invoke(app, ["show", str(corrupt_splice_file)])

        assert result.exit_code == 0
        assert "(1) snare" in result.stdout
        assert "ghost" not in result.stdout
        assert "clap" not in result.stdout

    def test_show_not_splice(self, not_splice_file):
        result = runner.invoke(app, ["show", str(not_splice_file)])

        assert result.exit_code == 1

    def test_show_missing(self, tmp_path):
        result = runner.invoke(app, ["show", str(tmp_path / "missing.splice")])

        assert result.exit_code == 1

    def test_show_float32_max_tempo(self, tmp_path):
        (tempo,) = struct.unpack("<f", b"\xff\xff\x7f\x7f")
        path = tmp_path / "loud.splice"
        path.write_bytes(encode_splice(tempo=tempo, tracks=[(0, b"kick", KICK_STEPS)]))

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 0
        assert result.stdout == (
            "Saved with HW Version: 0.808-alpha\n"
            "Tempo: 3.4028235e+38\n"
            "(0) kick\t|x---|x---|x---|x---|\n"
        )


class TestInfo:
    def test_info(self, splice_file):
        result = runner.invoke(app, ["info", str(splice_file), "--full", "--raw"])

        assert result.exit_code == 0
        assert "0.808-alpha" in result.stdout
        assert "end of data" in result.stdout
        assert "hh-close" in result.stdout

    def test_info_corrupt(self, corrupt_splice_file):
        result = runner.invoke(app, ["info", str(corrupt_splice_file)])

        assert result.exit_code == 0
        assert "corrupted record" in result.stdout

    def test_info_not_splice(self, not_splice_file):
        result = runner.invoke(app, ["info", str(not_splice_file)])

        assert result.exit_code == 1


class TestTracks:
    def test_tracks(self, splice_file):
        result = runner.invoke(app, ["tracks", str(splice_file)])

        assert result.exit_code == 0
        assert "kick" in result.stdout
        assert "snare" in result.stdout

    def test_tracks_filter_by_id(self, splice_file):
        result = runner.invoke(app, ["tracks", str(splice_file), "--id", "1", "--offsets"])

        assert result.exit_code == 0
        assert "snare" in result.stdout
        assert "kick" not in result.stdout


class TestValidate:
    def test_valid_file(self, splice_file):
        result = runner.invoke(app, ["validate", str(splice_file)])

        assert result.exit_code == 0
        assert "VALID" in result.stdout

    def test_corrupt_file_warns(self, corrupt_splice_file):
        result = runner.invoke(app, ["validate", str(corrupt_splice_file)])

        assert result.exit_code == 0
        assert "Corruption" in result.stdout

    def test_corrupt_file_strict(self, corrupt_splice_file):
        result = runner.invoke(app, ["validate", str(corrupt_splice_file), "--strict"])

        assert result.exit_code == 1
        assert "INVALID" in result.stdout

    def test_truncated_file(self, tmp_path, splice_data):
        path = tmp_path / "cut.splice"
        path.write_bytes(splice_data[:-5])

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1

    def test_not_splice(self, not_splice_file):
        result = runner.invoke(app, ["validate", str(not_splice_file)])

        assert result.exit_code == 1
        assert "Signature" in result.stdout


class TestDump:
    def test_dump(self, splice_file):
        result = runner.invoke(app, ["dump", str(splice_file)])

        assert result.exit_code == 0
        assert "SIGNATURE" in result.stdout
        assert "T2.STEPS" in result.stdout

    def test_dump_region(self, corrupt_splice_file):
        result = runner.invoke(app, ["dump", str(corrupt_splice_file), "--region", "ignored"])

        assert result.exit_code == 0
        assert "IGNORED" in result.stdout
        assert "T0.NAME" not in result.stdout

    def test_dump_unknown_region(self, splice_file):
        result = runner.invoke(app, ["dump", str(splice_file), "--region", "NOPE"])

        assert result.exit_code == 1


class TestExport:
    def test_export(self, splice_file, tmp_path):
        output = tmp_path / "groove.mid"

        result = runner.invoke(app, ["export", str(splice_file), "-o", str(output), "--bars", "2"])

        assert result.exit_code == 0
        midi = mido.MidiFile(str(output))
        assert len(midi.tracks) == 4

    def test_export_default_output(self, splice_file):
        result = runner.invoke(app, ["export", str(splice_file)])

        assert result.exit_code == 0
        assert splice_file.with_suffix(".mid").exists()

    def test_export_not_splice(self, not_splice_file, tmp_path):
        result = runner.invoke(app, ["export", str(not_splice_file), "-o", str(tmp_path / "x.mid")])

        assert result.exit_code == 1


class TestApp:
    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_debug_flag(self, splice_file):
        result = runner.invoke(app, ["--debug", "show", str(splice_file)])

        assert result.exit_code == 0
        assert "Tempo: 120" in result.stdout

    def test_logging_untouched_without_debug(self, splice_file):
        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            result = runner.invoke(app, ["show", str(splice_file)])

            assert result.exit_code == 0
            assert handler in root.handlers
        finally:
            root.removeHandler(handler)


class TestDirectoryArgument:
    @pytest.mark.parametrize("command", ["show", "info", "tracks", "validate", "dump", "export"])
    def test_directory_is_rejected(self, tmp_path, command):
        result = runner.invoke(app, [command, str(tmp_path)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, IsADirectoryError)


class TestExtremeTempo:
    @pytest.fixture
    def loud_file(self, tmp_path):
        (tempo,) = struct.unpack("<f", b"\xff\xff\x7f\x7f")
        path = tmp_path / "loud.splice"
        path.write_bytes(encode_splice(tempo=tempo, tracks=[(0, b"kick", KICK_STEPS)]))
        return path

    def test_info(self, loud_file):
        result = runner.invoke(app, ["info", str(loud_file)])

        assert result.exit_code == 0
        assert "3.4028235e+38" in result.stdout

    def test_validate_warns(self, loud_file):
        result = runner.invoke(app, ["validate", str(loud_file)])

        assert result.exit_code == 0
        assert "Unusual tempo" in result.stdout
