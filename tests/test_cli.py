"""Tests for the command-line interface."""

import io
import json
import logging

import pytest

from langseg import __version__
from langseg.cli import main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    # Handlers bound to a captured stream must not outlive the test
    logging.getLogger("langseg").handlers.clear()


@pytest.fixture
def write_text(tmp_path):
    def write(name, text, encoding="utf-8"):
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return str(path)

    return write


class TestCli:
    """Test suite for the langseg command."""

    def test_english_file(self, write_text, english_text, capsys):
        path = write_text("english.txt", english_text)

        status = main([path, "--log-level", "WARNING"])

        out = capsys.readouterr().out
        assert status == 0
        assert f"Analyzing {path} (total characters: 1000)" in out
        assert "Window size: 500 | Overlap: 400 | Step: 100" in out
        assert "Proportion of ENGLISH: 100.00% (total 1000 segment characters)" in out
        assert "Dominant language of text: ENGLISH" in out
        assert "Chars 00000-00499" not in out

    def test_segments_and_histogram(self, write_text, french_text, capsys):
        path = write_text("french.txt", french_text)

        status = main([path, "--segments", "--histogram", "--top", "3"])

        out = capsys.readouterr().out
        assert status == 0
        assert "Chars 00000-00499: => FRENCH (adding 100 chars)" in out
        assert "Top Letter Frequencies (A-Z + 14 Accents)" in out
        assert "Full Character Frequencies (Letters, Punctuation, Symbols)" in out
        assert "Dominant language of text: FRENCH" in out

    def test_json_output(self, write_text, french_text, capsys):
        path = write_text("french.txt", french_text)

        status = main([path, "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert status == 0
        assert payload["file"] == path
        assert payload["report"]["dominant_language"] == "french"
        assert payload["report"]["segments"] == []

    def test_json_with_segments(self, write_text, english_text, capsys):
        path = write_text("english.txt", english_text)

        main([path, "--json", "--segments"])

        payload = json.loads(capsys.readouterr().out)
        assert len(payload["report"]["segments"]) == 10

    def test_stdin(self, english_text, monkeypatch, capsys):
        stdin = io.TextIOWrapper(io.BytesIO(english_text.encode("utf-8")))
        monkeypatch.setattr("sys.stdin", stdin)

        status = main([])

        assert status == 0
        assert "Analyzing stdin" in capsys.readouterr().out

    def test_other_encoding(self, write_text, french_text, capsys):
        path = write_text("latin.txt", french_text, encoding="latin-1")

        status = main([path, "-e", "latin-1"])

        assert status == 0
        assert "Dominant language of text: FRENCH" in capsys.readouterr().out

    def test_too_short(self, write_text, capsys):
        path = write_text("short.txt", "Too short to analyze.")

        status = main([path])

        captured = capsys.readouterr()
        assert status == 1
        assert "below the minimum window size" in captured.err
        assert captured.out == ""

    def test_invalid_bytes(self, tmp_path, capsys):
        path = tmp_path / "broken.txt"
        path.write_bytes(b"\xff" * 200)

        status = main([str(path)])

        assert status == 1
        assert "not valid utf-8" in capsys.readouterr().err

    def test_continues_after_failure(self, write_text, english_text, tmp_path, capsys):
        good = write_text("english.txt", english_text)
        missing = str(tmp_path / "missing.txt")

        status = main([missing, good])

        captured = capsys.readouterr()
        assert status == 1
        assert "Cannot read" in captured.err
        assert f"Analyzing {good}" in captured.out

    def test_unknown_encoding(self, write_text, english_text, capsys):
        path = write_text("english.txt", english_text)

        assert main([path, "-e", "klingon"]) == 1
        assert "Unknown encoding" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])

        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out
