"""Phonetics for soundalike: word transcription and language detection.

Example:
    from soundalike.phonetics import detect_stream_language, get_transcriber

    detected = detect_stream_language(open("words.txt"))
    backend = get_transcriber("phonemizer")
    backend.transcribe("night", detected.language)   → "nˈaɪt"
"""

from .language import (
    DetectedLanguage,
    LanguageDetectionError,
    detect_language,
    detect_stream_language,
)
from .transcribe import (
    Transcriber,
    batch_transcribe,
    get_default_transcriber,
    get_transcriber,
    list_transcribers,
    register_transcriber,
    set_default_transcriber,
    transcribe,
)

__all__ = [
    "DetectedLanguage",
    "LanguageDetectionError",
    "Transcriber",
    "batch_transcribe",
    "detect_language",
    "detect_stream_language",
    "get_default_transcriber",
    "get_transcriber",
    "list_transcribers",
    "register_transcriber",
    "set_default_transcriber",
    "transcribe",
]
