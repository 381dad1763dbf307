"""soundalike - Phonemic word grouping toolkit.

A toolkit for finding words that share (or nearly share) a pronunciation
and for merging previously computed word groups.

Core concepts:
    - Every word is paired with a phonemic transcription
    - Words with identical transcriptions form a group
    - Groups observed in separate runs merge transitively

Example:
    "knight" /naɪt/ + "night" /naɪt/ → group "knight night"
    "night nite" + "knight night" → merged "knight night nite"

Usage:
    from soundalike.schema import Dictionary
    from soundalike.builder import GroupBuilder, WordGroups

    # Exact grouping
    dictionary = Dictionary.from_entries([("night", "naɪt"), ("knight", "naɪt")])
    groups = WordGroups.from_dict(dictionary)
    print(groups, end="")

    # Approximate search
    query = dictionary.words[0]
    for word in dictionary.find_similar(query, max_distance=1):
        print(word)

    # Merge previously computed groups
    builder = GroupBuilder()
    builder.extend(0, ["knight", "night"])
    builder.extend(1, ["night", "nite"])
    print(builder.build(), end="")
"""

__version__ = "0.1.0"
