"""Tab-separated word list ingestor.

Format: one entry per line.
    word<TAB>phonemes

Leading and trailing whitespace around both fields is ignored.
Lines that cannot be split are skipped with a warning.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from ..normalizer import grapheme_length
from ..schema import Dictionary
from .base import Ingestor, IngestResult

logger = logging.getLogger(__name__)


def parse_tsv_pair(line: str) -> Optional[tuple[str, str]]:
    """Split a line into a (word, phonemes) pair.

    Args:
        line: Raw line.

    Returns:
        The trimmed pair, or None if the line has no usable pair.
    """
    trimmed = line.strip()
    if "\t" in trimmed:
        key, value = trimmed.split("\t", 1)
        key = key.strip()
        value = value.strip()
        if key or value:
            return key, value
    if trimmed:
        logger.warning("could not parse line %r", trimmed)
    return None


class TsvIngestor(Ingestor):
    """Ingestor for word<TAB>phonemes lists."""

    def __init__(self, min_length: int = 0, max_length: Optional[int] = None):
        """Initialize ingestor.

        Args:
            min_length: Minimum word length in graphemes.
            max_length: Maximum word length in graphemes (None = unbounded).
        """
        self.min_length = min_length
        self.max_length = max_length

    def parse_line(self, line: str) -> Optional[tuple[str, str]]:
        return parse_tsv_pair(line)

    def accept(self, record: tuple[str, str]) -> bool:
        """Check the word length against the configured bounds."""
        if self.min_length <= 0 and self.max_length is None:
            return True
        length = grapheme_length(record[0])
        if length < self.min_length:
            return False
        if self.max_length is not None and length > self.max_length:
            return False
        return True

    def load(self, path: Optional[Path | str] = None) -> Dictionary:
        """Ingest a file (or stdin) straight into a Dictionary."""
        return Dictionary.from_entries(self.ingest(path).entries)

    def load_lines(self, lines: Iterable[str]) -> Dictionary:
        """Ingest lines straight into a Dictionary."""
        return Dictionary.from_entries(self.ingest_lines(lines).entries)


def ingest(
    path: Optional[Path | str] = None,
    min_length: int = 0,
    max_length: Optional[int] = None,
) -> IngestResult:
    """Convenience function to ingest a word list.

    Args:
        path: Path to TSV file (stdin when None).
        min_length: Minimum word length.
        max_length: Maximum word length.

    Returns:
        IngestResult with (word, phonemes) entries.
    """
    ingestor = TsvIngestor(min_length=min_length, max_length=max_length)
    return ingestor.ingest(path)


def load_dictionary(
    path: Optional[Path | str] = None,
    min_length: int = 0,
    max_length: Optional[int] = None,
) -> Dictionary:
    """Load a word list into a Dictionary."""
    ingestor = TsvIngestor(min_length=min_length, max_length=max_length)
    return ingestor.load(path)
