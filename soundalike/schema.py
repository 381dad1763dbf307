"""Word schema and data structures for soundalike.

Core concept:
    - A Word pairs a surface form with its phonemic transcription
    - A Dictionary is an ordered, non-deduplicated list of Words
    - Similarity is the Levenshtein distance between transcriptions

Example:
    Word("night", "naɪt").is_similar(Word("nite", "naɪt"), 0)  → True
    Word("night", "naɪt").is_similar(Word("net", "nɛt"), 1)    → True
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from rapidfuzz.distance import Levenshtein

from .normalizer import normalize_phonemes


@dataclass
class Word:
    """A word and its phonemic transcription."""

    word: str
    phonemes: str

    def __str__(self) -> str:
        return self.word

    def is_similar(self, other: "Word", max_distance: int) -> bool:
        """Check if two transcriptions are within max_distance edits.

        Args:
            other: Word to compare with.
            max_distance: Maximum Levenshtein distance (unit costs).

        Returns:
            True if the edit distance is at most max_distance.
        """
        # Length difference is a lower bound on the distance
        if abs(len(self.phonemes) - len(other.phonemes)) > max_distance:
            return False
        distance = Levenshtein.distance(
            self.phonemes, other.phonemes, score_cutoff=max_distance
        )
        return distance <= max_distance

    def normalize_phonemes(self) -> None:
        """Rewrite the transcription in normalized form."""
        self.phonemes = normalize_phonemes(self.phonemes)


class WordSearch:
    """Single-use cursor over a Dictionary yielding similar words.

    Scanning resumes right after the previous match, so earlier
    entries are never revisited. Once exhausted it stays exhausted.
    """

    def __init__(self, words: list[Word], query: Word, max_distance: int):
        self._words = words
        self.query = query
        self.max_distance = max_distance
        self.index = 0

    def __iter__(self) -> "WordSearch":
        return self

    def __next__(self) -> Word:
        while self.index < len(self._words):
            word = self._words[self.index]
            self.index += 1
            if word.is_similar(self.query, self.max_distance):
                return word
        raise StopIteration


@dataclass
class Dictionary:
    """An ordered collection of words with transcriptions."""

    words: list[Word] = field(default_factory=list)

    @classmethod
    def from_entries(cls, entries: Iterable[tuple[str, str]]) -> "Dictionary":
        """Create from (word, phonemes) pairs."""
        d = cls()
        d.extend(entries)
        return d

    def add(self, word: str, phonemes: str) -> None:
        """Append a word."""
        self.words.append(Word(word, phonemes))

    def extend(self, entries: Iterable[tuple[str, str]]) -> None:
        """Append (word, phonemes) pairs in order."""
        for word, phonemes in entries:
            self.add(word, phonemes)

    def normalize(self) -> None:
        """Normalize every transcription in place."""
        for word in self.words:
            word.normalize_phonemes()

    def find_similar(self, query: Word, max_distance: int) -> WordSearch:
        """Search for words whose transcription is close to query's.

        Args:
            query: Word to compare against.
            max_distance: Maximum Levenshtein distance.

        Returns:
            A fresh WordSearch starting at the first word.
        """
        return WordSearch(self.words, query, max_distance)

    def __iter__(self) -> Iterator[Word]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def entries(self) -> list[tuple[str, str]]:
        """Get (word, phonemes) pairs in order."""
        return [(w.word, w.phonemes) for w in self.words]
