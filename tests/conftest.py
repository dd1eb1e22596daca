"""
Shared fixtures for the file shifter test suite.
"""

import glob
from pathlib import Path
from typing import Iterable, List

import pytest


@pytest.fixture
def make_files(tmp_path):
    """Create files (content = their own name) and return their paths"""

    def _make(names: Iterable[str], directory: Path = None) -> List[Path]:
        directory = directory or tmp_path
        paths = []
        for name in names:
            path = directory / name
            path.write_text(name, encoding="utf-8")
            paths.append(path)
        return paths

    return _make


@pytest.fixture
def pattern_in(tmp_path):
    """Build a glob pattern rooted at tmp_path"""

    def _pattern(tail: str) -> str:
        return str(Path(glob.escape(str(tmp_path))) / tail)

    return _pattern
