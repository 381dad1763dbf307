"""Plain text word list ingestor.

Simple format: one word (or phrase) per line.
Surrounding whitespace is trimmed and empty lines are skipped.

Used as input for transcription into a word<TAB>phonemes dictionary.
"""

from pathlib import Path
from typing import Optional

from .base import Ingestor, IngestResult


class PlainTextIngestor(Ingestor):
    """Ingestor for plain text word lists."""

    def parse_line(self, line: str) -> Optional[str]:
        line = line.strip()
        return line or None


def ingest(path: Optional[Path | str] = None) -> IngestResult:
    """Convenience function to ingest a plain text word list.

    Args:
        path: Path to text file (stdin when None).

    Returns:
        IngestResult with words.
    """
    return PlainTextIngestor().ingest(path)
