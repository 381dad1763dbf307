"""Canonical word group collections.

A WordGroups holds groups of at least two distinct words. Members are
sorted within each group, and groups are sorted by their member lists.
Every producer (exact grouping, merged group files) funnels through
WordGroups.from_groups, so output is identical however the input was ordered.

Text format:
    aa cc
    b bb ddd
"""

from typing import Iterable, Iterator, TextIO

from ..schema import Dictionary


class WordGroups:
    """Sorted groups of words that sound alike."""

    def __init__(self, groups: list[list[str]] | None = None):
        self._groups: list[list[str]] = groups or []

    @classmethod
    def from_groups(cls, groups: Iterable[Iterable[str]]) -> "WordGroups":
        """Build from arbitrary candidate groups.

        Each group is deduplicated and sorted; groups left with fewer
        than two words are dropped.

        Args:
            groups: Candidate groups of words.

        Returns:
            WordGroups in canonical order.
        """
        result = []
        for group in groups:
            members = sorted(set(group))
            if len(members) > 1:
                result.append(members)
        result.sort()
        return cls(result)

    @classmethod
    def from_dict(cls, dictionary: Dictionary) -> "WordGroups":
        """Group words of one dictionary by identical transcription."""
        buckets: dict[str, list[str]] = {}
        for word in dictionary:
            buckets.setdefault(word.phonemes, []).append(word.word)
        return cls.from_groups(v for v in buckets.values() if len(v) > 1)

    @classmethod
    def from_dicts(cls, first: Dictionary, second: Dictionary) -> "WordGroups":
        """Group words of two dictionaries by identical transcription.

        Only groups with members from both dictionaries are kept.
        """
        buckets: dict[str, list[tuple[str, int]]] = {}
        for source, dictionary in enumerate((first, second)):
            for word in dictionary:
                buckets.setdefault(word.phonemes, []).append((word.word, source))

        return cls.from_groups(
            [w for w, _ in members]
            for members in buckets.values()
            if {source for _, source in members} == {0, 1}
        )

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[list[str]]:
        return iter(self._groups)

    def __bool__(self) -> bool:
        return bool(self._groups)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordGroups):
            return NotImplemented
        return self._groups == other._groups

    def __repr__(self) -> str:
        return f"WordGroups({len(self._groups)} groups)"

    def __str__(self) -> str:
        return "".join(f"{line}\n" for line in self.to_lines())

    def to_list(self) -> list[list[str]]:
        """Get groups as plain lists."""
        return [list(g) for g in self._groups]

    def to_lines(self) -> list[str]:
        """Get one space-separated line per group."""
        return [" ".join(g) for g in self._groups]

    def write(self, stream: TextIO) -> None:
        """Write one line per group to stream."""
        stream.write(str(self))
