"""Integration tests for the command-line entry points."""

import os
import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent

EXPECTED = {"⌚", "⌛", "\U0001f600"}


def run(*args):
    return subprocess.run(
        [sys.executable, *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        env={**os.environ, "PYTHONIOENCODING": "utf-8"},
        cwd=project_root,
    )


class TestRandomEmojiModule:
    """Test running the typer application as a module."""

    def test_end_to_end(self, data_file):
        """Test a real process prints one of the file's basic emoji."""
        result = run("-m", "emoji_picker.app", str(data_file))

        assert result.returncode == 0
        assert result.stdout.endswith("\n")
        assert result.stdout[:-1] in EXPECTED

    def test_missing_file_fails(self, tmp_path):
        result = run("-m", "emoji_picker.app", str(tmp_path / "missing.txt"))

        assert result.returncode != 0
        assert result.stdout == ""
        assert result.stderr


class TestEmojiPickerScript:
    """Test the cleo entry script from a source checkout."""

    def test_pick(self, sample_file):
        result = run("emoji_picker_cli.py", "pick", str(sample_file))

        assert result.returncode == 0
        assert result.stdout.strip() in EXPECTED

    def test_count(self, sample_file):
        result = run("emoji_picker_cli.py", "count", str(sample_file))

        assert result.returncode == 0
        assert result.stdout.strip() == "3"

    def test_version(self):
        result = run("emoji_picker_cli.py", "--version")

        assert result.returncode == 0
        assert "1.0.0" in result.stdout
