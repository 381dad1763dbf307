"""Phoneme normalization for soundalike.

Collapses IPA transcriptions so that allophones compare equal.
Stress and length marks are dropped, related symbols map to one
representative, and repeated symbols are squeezed.
"""

from itertools import groupby

import regex

# Spacing modifier letters (U+02B0) through combining diacritics (U+036F)
IPA_MODIFIERS = range(0x2B0, 0x370)

# Allophone groups and their canonical symbol
_PHONEME_GROUPS: dict[str, str] = {
    # Vowels
    "aäɐɑʌ": "a",
    "eæɛœɜ": "e",
    "iɨɪ": "i",
    "oɔɒɵʊ": "o",
    "uʉ": "u",
    "yʏø": "y",
    "ɘɤɞəɯ": "ɘ",
    # Consonants
    "bʙ": "b",
    "dɖɟ": "d",
    "fɸ": "f",
    "gɢ": "g",
    "jʎʝ": "j",
    "kq": "k",
    "lɭɫʟ": "l",
    "mɱ": "m",
    "nɳɲŋɴ": "n",
    "rɾɹɽɻʀʁ": "r",
    "tʈc": "t",
    "vβʋ": "v",
    "xɣχħhɦ": "x",
    "θð": "θ",
    "ʃʂç": "ʃ",
    "ʒʐ": "ʒ",
    "ɰʕ": "ɰ",
}

PHONEME_MAP: dict[str, str] = {
    symbol: canonical
    for symbols, canonical in _PHONEME_GROUPS.items()
    for symbol in symbols
}


def is_ignored(char: str) -> bool:
    """Check if a character carries no phonemic identity.

    Args:
        char: Single character.

    Returns:
        True for whitespace and IPA modifier / diacritic characters.
    """
    return ord(char) in IPA_MODIFIERS or char.isspace()


def normalize_phoneme(char: str) -> str:
    """Map a single IPA symbol to its canonical representative."""
    return PHONEME_MAP.get(char, char)


def normalize_phonemes(phonemes: str) -> str:
    """Normalize an IPA transcription.

    Args:
        phonemes: Raw transcription.

    Returns:
        Transcription without modifiers or whitespace, with allophones
        collapsed and runs of the same symbol squeezed to one.
    """
    mapped = (normalize_phoneme(c) for c in phonemes if not is_ignored(c))
    return "".join(symbol for symbol, _ in groupby(mapped))


def grapheme_length(text: str) -> int:
    """Count user-perceived characters (extended grapheme clusters) in text.

    Combining marks, spacing vowel signs, emoji modifiers and ZWJ
    sequences all belong to the cluster they extend.
    """
    return len(regex.findall(r"\X", text))
