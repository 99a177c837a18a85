"""Tests for the analyze_text command-line script."""

import importlib.util
import io
import json
import sys
from pathlib import Path

import pytest


SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "analyze_text.py"

_spec = importlib.util.spec_from_file_location("analyze_text", SCRIPT_PATH)
analyze_text = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(analyze_text)


def run_main(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["analyze_text.py", *args])
    return analyze_text.main()


class TestAnalyzeTextScript:
    """Tests for main()."""

    def test_text_argument(self, monkeypatch, capsys):
        exit_code = run_main(monkeypatch, "--text", "Hello world. How are you?")

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert set(data) == {"score", "comparative", "emotion", "textAnalysis"}
        assert data["textAnalysis"] == {
            "wordCount": 5,
            "sentenceCount": 2,
            "averageWordLength": "5.00",
            "uniqueWords": 5,
        }

    def test_match_mode_and_transcript(self, monkeypatch, capsys):
        exit_code = run_main(
            monkeypatch,
            "--text", "she made dinner",
            "--match-mode", "token",
            "--include-transcript",
        )

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["emotion"]["anger"] is False
        assert data["transcript"] == "she made dinner"

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("I am so happy"))

        exit_code = run_main(monkeypatch)

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["emotion"]["joy"] is True

    def test_input_file(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("What a terrible day", encoding="utf-8")

        exit_code = run_main(monkeypatch, "--input", str(path))

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["emotion"]["sadness"] is True

    def test_missing_input_file(self, monkeypatch, capsys, tmp_path):
        exit_code = run_main(monkeypatch, "--input", str(tmp_path / "missing.txt"))

        assert exit_code == 1
        error = json.loads(capsys.readouterr().err)
        assert error["code"] == "FILE_NOT_FOUND"
