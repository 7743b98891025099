from pathlib import Path

import pytest

from readability_index.errors import ReadabilityError, TextLoadError
from readability_index.loader import load_text
from tests.utils import GARDEN_TEXT, write_text_file


def test_load_text_reads_whole_file(tmp_path: Path):
    path = write_text_file(tmp_path / "garden.txt", GARDEN_TEXT)
    assert load_text(path) == GARDEN_TEXT
    assert load_text(str(path)) == GARDEN_TEXT


def test_load_text_honours_encoding(tmp_path: Path):
    path = write_text_file(tmp_path / "cafe.txt", "Un café. ", encoding="latin-1")
    assert load_text(path, encoding="latin-1") == "Un café. "


def test_load_text_replaces_undecodable_bytes(tmp_path: Path):
    path = write_text_file(tmp_path / "cafe.txt", "Un café. ", encoding="latin-1")
    assert load_text(path) == "Un caf\ufffd. "


def test_load_text_unknown_encoding(tmp_path: Path):
    path = write_text_file(tmp_path / "garden.txt", GARDEN_TEXT)
    with pytest.raises(TextLoadError, match="unknown encoding"):
        load_text(path, encoding="no-such-codec")


def test_load_text_missing_file(tmp_path: Path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(TextLoadError) as excinfo:
        load_text(missing)
    assert "missing.txt" in str(excinfo.value)
    assert isinstance(excinfo.value, ReadabilityError)


def test_load_text_directory(tmp_path: Path):
    with pytest.raises(TextLoadError):
        load_text(tmp_path)
