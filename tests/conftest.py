"""Shared fixtures."""

from pathlib import Path

import pytest

from emoji_picker import console

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    """Keep verbose state and environment overrides from leaking between tests."""
    for name in (
        "EMOJI_PICKER_DATA_FILE",
        "EMOJI_PICKER_SEED",
        "EMOJI_PICKER_VERBOSE",
        "EMOJI_PICKER_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    console.configure_logging(False)
    yield
    console.configure_logging(False)


@pytest.fixture
def sample_file():
    return DATA_DIR / "emoji-sequences-sample.txt"


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "emoji-sequences.txt"
    path.write_text(
        "231A..231B ; Basic_Emoji ; watch\n1F600 ; Basic_Emoji ; grin\n",
        encoding="utf-8",
    )
    return path
