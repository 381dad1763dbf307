"""Language detection for word lists.

Picks the transcription language when the user does not give one.
Detection reads the input only as far as needed; the lines it consumed
are handed back so they can be transcribed too.

Usage:
    from soundalike.phonetics.language import detect_stream_language

    lines = iter(open("words.txt"))
    detected = detect_stream_language(lines)
    for line in itertools.chain(detected.consumed, lines):
        ...
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException

from .. import config

# langdetect is randomized unless seeded
DetectorFactory.seed = 0


class LanguageDetectionError(ValueError):
    """Input ended before the language could be detected reliably."""


@dataclass
class DetectedLanguage:
    """Detected language and the input read to detect it."""

    language: str
    consumed: list[str] = field(default_factory=list)


def _primary_subtag(code: str) -> str:
    """Reduce a language tag to its 2-letter primary subtag ("zh-cn" → "zh")."""
    return code.split("-")[0].lower()


def detect_language(
    text: str,
    min_chars: Optional[int] = None,
    min_probability: Optional[float] = None,
) -> Optional[str]:
    """Detect the language of text.

    Args:
        text: Text to inspect.
        min_chars: Minimum non-whitespace characters for a guess.
        min_probability: Minimum probability of the best guess.

    Returns:
        2-letter language code, or None if the guess is unreliable.
    """
    if min_chars is None:
        min_chars = config.default_detection_min_chars()
    if min_probability is None:
        min_probability = config.default_detection_min_probability()

    if sum(1 for c in text if not c.isspace()) < min_chars:
        return None

    try:
        guesses = detect_langs(text)
    except LangDetectException:
        return None

    if not guesses or guesses[0].prob < min_probability:
        return None
    return _primary_subtag(guesses[0].lang)


def detect_stream_language(
    lines: Iterable[str],
    min_chars: Optional[int] = None,
    min_probability: Optional[float] = None,
) -> DetectedLanguage:
    """Read lines until their language can be detected.

    Args:
        lines: Input lines. When an iterator is given, lines after the
            consumed ones are left unread.
        min_chars: Minimum non-whitespace characters for a guess.
        min_probability: Minimum probability of the best guess.

    Returns:
        DetectedLanguage with the lines read so far.

    Raises:
        LanguageDetectionError: If the input ends first.
    """
    consumed: list[str] = []
    for line in lines:
        consumed.append(line)
        language = detect_language(
            "".join(consumed),
            min_chars=min_chars,
            min_probability=min_probability,
        )
        if language is not None:
            return DetectedLanguage(language=language, consumed=consumed)

    raise LanguageDetectionError("Not enough text for language detection")
