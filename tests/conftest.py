"""Pytest configuration and fixtures."""

import io
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_tsv_content():
    """Sample word<TAB>phonemes dictionary content."""
    return "cc\ta\n bb\tb\n cc\ta\n aa\ta\n"


@pytest.fixture
def sample_groups_content():
    """Sample word group file content."""
    return "aa bb cc\n bb b\n a c\n"


@pytest.fixture
def sample_wordlist_content():
    """Sample plain text word list."""
    return """hello

world
  test
"""


@pytest.fixture
def write_file(tmp_path):
    """Write content to a file in a temporary directory."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def stdin(monkeypatch):
    """Replace stdin with given text."""

    def _set(text: str) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return _set
