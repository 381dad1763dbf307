"""Base ingestor interface for line-based sources.

All ingestors inherit from Ingestor and implement parse_line().
This provides a consistent API for loading records from any line format,
whether the lines come from a file, stdin or an in-memory list.
"""

import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, TextIO


@dataclass
class IngestResult:
    """Result of ingesting a line-based source."""

    entries: list[Any]
    source_path: str
    total_raw: int = 0          # Non-blank lines in source
    total_valid: int = 0        # Records kept after parsing and filtering
    total_filtered: int = 0     # Parsed records rejected by filters
    errors: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.source_path}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{len(self.errors)} errors)"
        )


@contextmanager
def open_input(path: Optional[Path | str] = None) -> Iterator[TextIO]:
    """Open a file for reading, or use stdin when path is None.

    Files are decoded as strict UTF-8, so invalid bytes raise
    UnicodeDecodeError while reading, the same as on stdin.
    """
    if path is None:
        yield sys.stdin
        return
    with open(path, "r", encoding="utf-8") as f:
        yield f


@contextmanager
def open_output(path: Optional[Path | str] = None) -> Iterator[TextIO]:
    """Open a file for writing, or use stdout when path is None."""
    if path is None:
        yield sys.stdout
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as f:
        yield f


class Ingestor(ABC):
    """Base class for line-based ingestors.

    Subclasses must implement:
        - parse_line(line) -> record, or None if the line is unusable

    Subclasses may override:
        - accept(record) -> bool to filter parsed records
    """

    def get_source_name(self, path: Optional[Path | str]) -> str:
        """Generate a display name for a source."""
        return "<stdin>" if path is None else str(path)

    @abstractmethod
    def parse_line(self, line: str) -> Optional[Any]:
        """Parse one line.

        Args:
            line: Raw line, possibly with trailing newline.

        Returns:
            Parsed record, or None to skip the line.
        """
        pass

    def accept(self, record: Any) -> bool:
        """Check if a parsed record should be kept."""
        return True

    def parse(self, lines: Iterable[str]) -> Iterator[tuple[Any, int]]:
        """Parse lines and yield (record, line_number) tuples.

        Args:
            lines: Lines of the source.

        Yields:
            Tuples of (record, line_number) for lines that parsed.
        """
        for line_num, line in enumerate(lines, start=1):
            record = self.parse_line(line)
            if record is not None:
                yield record, line_num

    def ingest_lines(self, lines: Iterable[str], source: str = "<lines>") -> IngestResult:
        """Ingest records from an iterable of lines."""
        result = IngestResult(entries=[], source_path=source)

        for line_num, line in enumerate(lines, start=1):
            if not line.strip():
                continue

            result.total_raw += 1
            record = self.parse_line(line)
            if record is None:
                result.errors.append(
                    f"line {line_num}: could not parse {line.strip()!r}"
                )
                continue

            if not self.accept(record):
                result.total_filtered += 1
                continue

            result.entries.append(record)
            result.total_valid += 1

        return result

    def ingest(self, path: Optional[Path | str] = None) -> IngestResult:
        """Ingest records from a file, or stdin when path is None.

        Args:
            path: Path to source file.

        Returns:
            IngestResult with records and statistics.
        """
        with open_input(path) as f:
            return self.ingest_lines(f, source=self.get_source_name(path))
