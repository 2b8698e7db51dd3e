from pathlib import Path

import pytest

SAMPLE_DICTIONARY = (
    Path(__file__).resolve().parents[1] / "data" / "dictionaries" / "thai-sample.txt"
)


@pytest.fixture
def sample_dictionary_path() -> Path:
    return SAMPLE_DICTIONARY


@pytest.fixture
def word_file(tmp_path):
    """Write a UTF-8 word list and return its path."""

    def _write(content: str, name: str = "words.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
