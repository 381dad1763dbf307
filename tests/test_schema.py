"""Tests for the schema module."""

import pytest
from rapidfuzz.distance import Levenshtein

from soundalike.schema import Dictionary, Word, WordSearch


def reference_levenshtein(a: str, b: str) -> int:
    """Plain dynamic-programming edit distance."""
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current
    return previous[-1]


class TestWord:
    """Tests for Word dataclass."""

    def test_creation(self):
        """Test Word creation."""
        w = Word("word", "phonemes")
        assert w.word == "word"
        assert w.phonemes == "phonemes"

    def test_str(self):
        """Test Word prints as its surface form."""
        assert str(Word("night", "naɪt")) == "night"

    def test_equality(self):
        """Test equality compares both fields."""
        assert Word("a", "x") == Word("a", "x")
        assert Word("a", "x") != Word("a", "y")
        assert Word("a", "x") != Word("b", "x")

    def test_normalize_phonemes(self):
        """Test normalization rewrites the transcription only."""
        w = Word("abbreviations", "ʌbɹiˌviejˈʃʌnz")
        w.normalize_phonemes()
        assert w.word == "abbreviations"
        assert w.phonemes == "abriviejʃanz"


class TestWordIsSimilar:
    """Tests for Word.is_similar."""

    @pytest.mark.parametrize(
        "first, second, max_distance, expected",
        [
            (("w", "p"), ("w2", "p"), 0, True),
            (("w", "p"), ("w2", "p2"), 0, False),
            (("w", "p"), ("w2", "p2"), 1, True),
            (("w", "p"), ("w2", "q2"), 1, False),
            (("w", "p"), ("w2", "q2"), 2, True),
        ],
    )
    def test_cases(self, first, second, max_distance, expected):
        """Test similarity at various distances."""
        assert Word(*first).is_similar(Word(*second), max_distance) is expected

    def test_equal_length_over_distance(self):
        """Test equal lengths still need the full distance check."""
        assert Word("a", "abc").is_similar(Word("b", "xyz"), 2) is False
        assert Word("a", "abc").is_similar(Word("b", "xyz"), 3) is True

    def test_length_counts_characters(self):
        """Test length difference counts characters, not bytes."""
        # "ʃ" is two bytes in UTF-8
        assert Word("a", "ʃ").is_similar(Word("b", "s"), 1) is True

    def test_symmetric(self):
        """Test similarity does not depend on argument order."""
        a, b = Word("a", "naɪt"), Word("b", "nɛt")
        for d in range(4):
            assert a.is_similar(b, d) == b.is_similar(a, d)

    def test_matches_reference_levenshtein(self):
        """Test the result agrees with a reference implementation."""
        transcriptions = ["", "a", "ab", "ba", "abc", "naɪt", "nɛt", "kæt", "ʃiːp", "xyz"]
        for a in transcriptions:
            for b in transcriptions:
                distance = reference_levenshtein(a, b)
                assert Levenshtein.distance(a, b) == distance
                for d in range(5):
                    expected = distance <= d
                    assert Word("x", a).is_similar(Word("y", b), d) is expected


class TestDictionary:
    """Tests for Dictionary."""

    def test_init(self):
        """Test empty dictionary."""
        d = Dictionary()
        assert len(d) == 0
        assert list(d) == []

    def test_add(self):
        """Test adding words preserves order."""
        d = Dictionary()
        d.add("w", "p")
        d.add("w2", "p2")
        assert d.entries() == [("w", "p"), ("w2", "p2")]

    def test_extend(self):
        """Test extending from pairs."""
        d = Dictionary()
        d.extend([("w", "p"), ("w2", "p2")])
        assert d.entries() == [("w", "p"), ("w2", "p2")]

    def test_from_entries(self):
        """Test construction from pairs."""
        d = Dictionary.from_entries([("w", "p"), ("w2", "p2")])
        assert d.entries() == [("w", "p"), ("w2", "p2")]

    def test_keeps_duplicates(self):
        """Test duplicate entries are not merged."""
        d = Dictionary.from_entries([("w", "p"), ("w", "p")])
        assert len(d) == 2

    def test_iter(self):
        """Test iteration yields Words."""
        d = Dictionary.from_entries([("w", "p")])
        assert list(d) == [Word("w", "p")]

    def test_normalize(self):
        """Test every member is normalized."""
        d = Dictionary.from_entries([("a", "ˈʌ"), ("b", "m ʌ nʲ")])
        d.normalize()
        assert d.entries() == [("a", "a"), ("b", "man")]


class TestFindSimilar:
    """Tests for Dictionary.find_similar."""

    @pytest.mark.parametrize(
        "entries, query, max_distance, expected",
        [
            ([("w", "p"), ("w2", "p2")], ("x", "y"), 0, []),
            ([("w", "p"), ("w2", "p2")], ("x", "y"), 1, ["w"]),
            ([("w", "p1"), ("w2", "p2")], ("x", "2"), 1, ["w2"]),
            ([("w", "p"), ("w2", "p2")], ("x", "p"), 1, ["w", "w2"]),
        ],
    )
    def test_cases(self, entries, query, max_distance, expected):
        """Test search results."""
        d = Dictionary.from_entries(entries)
        results = [w.word for w in d.find_similar(Word(*query), max_distance)]
        assert results == expected

    def test_returns_word_search(self):
        """Test the search is a WordSearch iterator."""
        d = Dictionary.from_entries([("w", "p")])
        search = d.find_similar(Word("x", "p"), 0)
        assert isinstance(search, WordSearch)
        assert iter(search) is search

    def test_yields_dictionary_members(self):
        """Test results are the dictionary's own Word objects."""
        d = Dictionary.from_entries([("w", "p")])
        results = list(d.find_similar(Word("x", "p"), 0))
        assert results[0] is d.words[0]

    def test_resumes_after_match(self):
        """Test the cursor moves past each match."""
        d = Dictionary.from_entries([("a", "p"), ("b", "q"), ("c", "p")])
        search = d.find_similar(Word("x", "p"), 0)
        assert next(search).word == "a"
        assert search.index == 1
        assert next(search).word == "c"
        assert search.index == 3

    def test_not_restartable(self):
        """Test an exhausted search stays exhausted."""
        d = Dictionary.from_entries([("a", "p"), ("b", "p")])
        search = d.find_similar(Word("x", "p"), 0)
        assert [w.word for w in search] == ["a", "b"]
        assert list(search) == []
        with pytest.raises(StopIteration):
            next(search)

    def test_independent_searches(self):
        """Test each call starts a fresh cursor at the beginning."""
        d = Dictionary.from_entries([("a", "p"), ("b", "p")])
        first = d.find_similar(Word("x", "p"), 0)
        next(first)
        second = d.find_similar(Word("x", "p"), 0)
        assert [w.word for w in second] == ["a", "b"]
        assert [w.word for w in first] == ["b"]

    def test_includes_query_itself(self):
        """Test a query present in the dictionary matches itself."""
        d = Dictionary.from_entries([("a", "p"), ("b", "p")])
        results = [w.word for w in d.find_similar(Word("a", "p"), 0)]
        assert results == ["a", "b"]
