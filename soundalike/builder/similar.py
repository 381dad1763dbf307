"""Approximate grouping by transcription edit distance.

For every word of a dictionary, collect the words of another (or the
same) dictionary whose transcriptions lie within a maximum Levenshtein
distance. Unlike exact grouping the result is not canonicalized: one
group per query word, query first, matches in dictionary order.
"""

from typing import Iterator

from ..schema import Dictionary, Word


def find_similar_groups(
    dictionary: Dictionary,
    other: Dictionary,
    max_distance: int,
) -> Iterator[list[Word]]:
    """Yield [query, *matches] for each word with at least one match.

    Matches equal to the query word itself are discarded.

    Args:
        dictionary: Words to use as queries.
        other: Words to search.
        max_distance: Maximum Levenshtein distance.

    Yields:
        Lists of words, the query first.
    """
    for query in dictionary:
        group = [query]
        group.extend(
            w for w in other.find_similar(query, max_distance) if w != query
        )
        if len(group) > 1:
            yield group
