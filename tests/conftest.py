"""Shared fixtures for the batch rename tests."""

from pathlib import Path

import pytest


def _make_files(directory: Path, *names: str) -> list[Path]:
    paths = []
    for name in names:
        path = directory / name
        path.write_text("")
        paths.append(path)
    return paths


@pytest.fixture
def make_files():
    """Create empty files in a directory and return their paths."""
    return _make_files


@pytest.fixture
def mixed_dir(tmp_path: Path) -> Path:
    """A directory with three files and two folders."""
    _make_files(tmp_path, "a.txt", "b.txt", "c.txt")
    (tmp_path / "docs").mkdir()
    (tmp_path / "images").mkdir()
    return tmp_path
