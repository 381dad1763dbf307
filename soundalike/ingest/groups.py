"""Word group file ingestor.

Format: one group per line, words separated by whitespace.
    aa bb cc
    bb b

Every line gets a group id from a counter that keeps running across
files, so groups from several files can be merged in one GroupBuilder.
"""

from itertools import count
from pathlib import Path
from typing import Iterable, Iterator, Optional

from ..builder import GroupBuilder, WordGroups
from .base import Ingestor, open_input


class GroupFileIngestor(Ingestor):
    """Ingestor for whitespace-separated group files."""

    def parse_line(self, line: str) -> list[str]:
        return line.split()


class GroupMerger:
    """Feeds group files into a GroupBuilder."""

    def __init__(self, builder: Optional[GroupBuilder[int, str]] = None):
        self.builder: GroupBuilder[int, str] = builder or GroupBuilder()
        self._ids: Iterator[int] = count()
        self._ingestor = GroupFileIngestor()

    def add_lines(self, lines: Iterable[str]) -> None:
        """Add one group per line."""
        for members, _ in self._ingestor.parse(lines):
            self.builder.extend(next(self._ids), members)

    def add_file(self, path: Optional[Path | str] = None) -> None:
        """Add the groups of a file (or stdin when path is None)."""
        with open_input(path) as f:
            self.add_lines(f)

    def build(self) -> WordGroups:
        """Get the merged groups."""
        return self.builder.build()


def merge_group_files(paths: Iterable[Path | str]) -> WordGroups:
    """Merge group files into canonical WordGroups.

    Args:
        paths: Group files, in order. Reads stdin when empty.

    Returns:
        Merged WordGroups.
    """
    merger = GroupMerger()
    paths = list(paths)
    if not paths:
        merger.add_file(None)
    for path in paths:
        merger.add_file(path)
    return merger.build()
