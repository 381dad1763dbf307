"""Pluggable IPA transcription backends.

A backend turns one word into a phonemic transcription for a language.
Words a backend cannot handle come back as None and are left out of the
dictionary by the caller.

Backends:
    - phonemizer: espeak-ng through the phonemizer package (default)
    - espeak: the espeak-ng command line, IPA or ASCII phoneme mnemonics
    - epitran: rule based, many scripts
    - g2p_en: neural model, English only
    - gruut: lexicon + neural model

The espeak based backends accept espeak voice names (e.g. "en-gb-x-rp")
wherever a language code is expected.

Usage:
    from soundalike.phonetics import get_transcriber
    backend = get_transcriber("espeak")
    backend.transcribe("night", "en")   → "nˈaɪt"

    from soundalike.phonetics import register_transcriber
    register_transcriber("custom", MyTranscriber)
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Any, Optional

from .. import config

logger = logging.getLogger(__name__)

LANGUAGE_NAMES = {
    "de": "German",
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "it": "Italian",
    "nl": "Dutch",
    "pl": "Polish",
    "pt": "Portuguese",
    "ru": "Russian",
    "tr": "Turkish",
}


class Transcriber(ABC):
    """Base class for transcription backends.

    Subclasses set:
        - name: registry name
        - language_codes: 2-letter code -> the backend's own language code

    and implement transcribe().
    """

    name: str = "base"
    language_codes: dict[str, str] = {}
    # Unknown codes are handed to the backend unchanged
    passthrough: bool = False

    @abstractmethod
    def transcribe(self, word: str, language: str) -> Optional[str]:
        """Transcribe a word.

        Args:
            word: Word to transcribe.
            language: 2-letter code, or a backend voice name.

        Returns:
            Transcription, or None when the backend has none.
        """

    def backend_code(self, language: str) -> Optional[str]:
        """Translate a language code to the backend's own code."""
        if language in self.language_codes:
            return self.language_codes[language]
        return language if self.passthrough else None

    def supports_language(self, language: str) -> bool:
        return language in self.language_codes

    def available_languages(self) -> dict[str, str]:
        """Get supported codes mapped to display names, sorted by code."""
        return {
            code: LANGUAGE_NAMES.get(code, code)
            for code in sorted(self.language_codes)
        }

    def batch_transcribe(
        self,
        words: list[str],
        language: str,
        skip_errors: bool = True,
    ) -> dict[str, Optional[str]]:
        """Transcribe several words.

        Args:
            words: Words to transcribe.
            language: Language code.
            skip_errors: Map failing words to None instead of raising.

        Returns:
            Dict of word -> transcription.
        """
        results: dict[str, Optional[str]] = {}
        for word in words:
            try:
                results[word] = self.transcribe(word, language)
            except Exception:
                if not skip_errors:
                    raise
                logger.debug("%s failed on %r", self.name, word, exc_info=True)
                results[word] = None
        return results


class PhonemizerTranscriber(Transcriber):
    """espeak-ng through phonemizer, stress marks kept.

    One EspeakBackend is created per voice and reused.
    Requires: pip install phonemizer, plus an espeak-ng system install.
    """

    name = "phonemizer"
    passthrough = True
    language_codes = {
        "de": "de",
        "en": "en-us",
        "es": "es",
        "fr": "fr-fr",
        "it": "it",
        "nl": "nl",
        "pl": "pl",
        "pt": "pt",
        "ru": "ru",
        "tr": "tr",
    }

    def __init__(self):
        self._backends: dict[str, Any] = {}
        self._voices: Optional[dict[str, str]] = None

    def _backend(self, voice: str):
        backend = self._backends.get(voice)
        if backend is None:
            from phonemizer.backend import EspeakBackend

            backend = EspeakBackend(
                voice,
                preserve_punctuation=False,
                with_stress=True,
            )
            self._backends[voice] = backend
        return backend

    def transcribe(self, word: str, language: str) -> Optional[str]:
        try:
            lines = self._backend(self.backend_code(language)).phonemize(
                [word], strip=True
            )
        except Exception:
            logger.debug("phonemizer failed on %r", word, exc_info=True)
            return None
        return lines[0] if lines and lines[0] else None

    def available_languages(self) -> dict[str, str]:
        if self._voices is None:
            try:
                from phonemizer.backend import EspeakBackend

                self._voices = dict(sorted(EspeakBackend.supported_languages().items()))
            except Exception:
                logger.debug("could not list espeak-ng voices", exc_info=True)
                self._voices = {}
        return self._voices or super().available_languages()

    def supports_language(self, language: str) -> bool:
        return (
            super().supports_language(language)
            or language in self.available_languages()
        )


class EspeakTranscriber(Transcriber):
    """The espeak-ng command line.

    Install: apt install espeak-ng / brew install espeak-ng
    """

    name = "espeak"
    passthrough = True
    language_codes = {
        "de": "de",
        "en": "en-us",
        "es": "es",
        "fr": "fr",
        "it": "it",
        "nl": "nl",
        "pl": "pl",
        "pt": "pt",
        "ru": "ru",
        "tr": "tr",
    }

    def __init__(self, ascii: bool = False):
        """Initialize transcriber.

        Args:
            ascii: Output espeak's ASCII phoneme mnemonics instead of IPA.
        """
        self.ascii = ascii

    def command(self, word: str, language: str) -> list[str]:
        """Build the espeak-ng command line for a word."""
        mode = "-x" if self.ascii else "--ipa"
        return ["espeak-ng", "-v", self.backend_code(language), "-q", mode, word]

    def transcribe(self, word: str, language: str) -> Optional[str]:
        try:
            proc = subprocess.run(
                self.command(word, language),
                capture_output=True,
                text=True,
                timeout=5,
            )
        except (OSError, subprocess.SubprocessError):
            logger.debug("espeak-ng failed on %r", word, exc_info=True)
            return None
        if proc.returncode != 0:
            return None
        return proc.stdout.strip() or None

    def available_languages(self) -> dict[str, str]:
        """Get espeak-ng voices as {language: voice name}."""
        try:
            proc = subprocess.run(
                ["espeak-ng", "--voices"],
                capture_output=True,
                text=True,
                timeout=5,
            )
        except (OSError, subprocess.SubprocessError):
            logger.debug("could not list espeak-ng voices", exc_info=True)
            return super().available_languages()

        # Header: Pty Language Age/Gender VoiceName File Other Languages
        voices: dict[str, str] = {}
        for row in proc.stdout.splitlines()[1:]:
            columns = row.split()
            if len(columns) >= 4:
                voices.setdefault(columns[1], columns[3])
        return dict(sorted(voices.items())) or super().available_languages()

    def supports_language(self, language: str) -> bool:
        return (
            super().supports_language(language)
            or language in self.available_languages()
        )


class EpitranTranscriber(Transcriber):
    """Rule based transcription through epitran.

    Install: pip install epitran
    """

    name = "epitran"
    language_codes = {
        "de": "deu-Latn",
        "en": "eng-Latn",
        "es": "spa-Latn",
        "fr": "fra-Latn",
        "it": "ita-Latn",
        "nl": "nld-Latn",
        "pl": "pol-Latn",
        "ru": "rus-Cyrl",
        "tr": "tur-Latn",
    }

    def __init__(self):
        self._models: dict[str, Any] = {}

    def transcribe(self, word: str, language: str) -> Optional[str]:
        code = self.backend_code(language)
        if code is None:
            return None
        try:
            if code not in self._models:
                import epitran

                self._models[code] = epitran.Epitran(code)
            return self._models[code].transliterate(word) or None
        except Exception:
            logger.debug("epitran failed on %r", word, exc_info=True)
            return None


class G2PEnglishTranscriber(Transcriber):
    """English grapheme-to-phoneme model (ARPAbet output).

    Install: pip install g2p-en
    """

    name = "g2p_en"
    language_codes = {"en": "en"}

    def __init__(self):
        self._model = None

    def transcribe(self, word: str, language: str) -> Optional[str]:
        if self.backend_code(language) is None:
            return None
        try:
            if self._model is None:
                from g2p_en import G2p

                self._model = G2p()
            # Phones are multi-letter; join without spaces like the IPA backends
            return "".join(p for p in self._model(word) if p.strip()) or None
        except Exception:
            logger.debug("g2p_en failed on %r", word, exc_info=True)
            return None


class GruutTranscriber(Transcriber):
    """Lexicon and neural model transcription through gruut.

    Install: pip install gruut
    """

    name = "gruut"
    language_codes = {
        "de": "de-de",
        "en": "en-us",
        "es": "es-es",
        "fr": "fr-fr",
        "it": "it-it",
        "nl": "nl",
        "ru": "ru-ru",
    }

    def transcribe(self, word: str, language: str) -> Optional[str]:
        lang = self.backend_code(language)
        if lang is None:
            return None
        try:
            from gruut import sentences

            phonemes = [
                phoneme
                for sentence in sentences(word, lang=lang)
                for w in sentence
                if w.phonemes
                for phoneme in w.phonemes
            ]
        except Exception:
            logger.debug("gruut failed on %r", word, exc_info=True)
            return None
        return "".join(phonemes) or None


# =============================================================================
# Registry
# =============================================================================

_TRANSCRIBERS: dict[str, type[Transcriber]] = {
    cls.name: cls
    for cls in (
        PhonemizerTranscriber,
        EspeakTranscriber,
        EpitranTranscriber,
        G2PEnglishTranscriber,
        GruutTranscriber,
    )
}

# One shared instance per name
_INSTANCES: dict[str, Transcriber] = {}

_default_name: str = config.default_transcriber()


def get_transcriber(name: str) -> Transcriber:
    """Get the shared instance of a registered backend.

    Raises:
        ValueError: If no backend is registered under name.
    """
    if name not in _TRANSCRIBERS:
        raise ValueError(
            f"Unknown transcriber: {name}. Available: {list_transcribers()}"
        )
    if name not in _INSTANCES:
        _INSTANCES[name] = _TRANSCRIBERS[name]()
    return _INSTANCES[name]


def register_transcriber(name: str, cls: type[Transcriber]) -> None:
    """Register a backend class, replacing any earlier one of that name."""
    _TRANSCRIBERS[name] = cls
    _INSTANCES.pop(name, None)


def list_transcribers() -> list[str]:
    return list(_TRANSCRIBERS)


def get_default_transcriber() -> str:
    return _default_name


def set_default_transcriber(name: str) -> None:
    """Change the backend used when none is named."""
    global _default_name
    if name not in _TRANSCRIBERS:
        raise ValueError(f"Unknown transcriber: {name}")
    _default_name = name


def transcribe(word: str, language: str, backend: Optional[str] = None) -> Optional[str]:
    """Transcribe a word with the named (or default) backend."""
    return get_transcriber(backend or _default_name).transcribe(word, language)


def batch_transcribe(
    words: list[str],
    language: str,
    backend: Optional[str] = None,
    skip_errors: bool = True,
) -> dict[str, Optional[str]]:
    """Transcribe several words with the named (or default) backend."""
    transcriber = get_transcriber(backend or _default_name)
    return transcriber.batch_transcribe(words, language, skip_errors=skip_errors)
