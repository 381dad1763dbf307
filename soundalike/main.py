"""soundalike CLI - Phonemic word grouping toolkit.

Usage:
    python -m soundalike.main create-dict -l en words.txt -o words.tsv
    python -m soundalike.main find -n -d 1 words.tsv
    python -m soundalike.main merge groups1.txt groups2.txt

The same commands are installed as create-ipa-dict, find-similar-words
and merge-word-groups.
"""

import argparse
import logging
import sys
from itertools import chain
from pathlib import Path
from typing import Iterator, Optional

from . import config as cfg
from .builder import WordGroups, find_similar_groups
from .ingest import open_input, open_output
from .ingest.groups import merge_group_files
from .ingest.plain_text import PlainTextIngestor
from .ingest.tsv import TsvIngestor
from .phonetics import (
    Transcriber,
    detect_stream_language,
    get_transcriber,
)
from .phonetics.transcribe import EspeakTranscriber

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per tool."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        action="store_true",
        default=cfg.default_verbose(),
        help="Show progress messages on stderr",
    )

    parser = argparse.ArgumentParser(
        prog="soundalike",
        description="soundalike - Phonemic word grouping toolkit",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    # create-dict
    create = commands.add_parser(
        "create-dict",
        parents=[common],
        help="Create IPA dictionary from a word list",
        description="Create IPA dictionary from a word list.",
    )
    create.add_argument(
        "--list-languages",
        "-L",
        action="store_true",
        help="Print supported languages and exit",
    )
    create.add_argument(
        "--language",
        "-l",
        type=str,
        help="Set language (default: detect)",
    )
    create.add_argument(
        "--voice",
        "-v",
        type=str,
        help="Set espeak voice (default: use the language's default voice)",
    )
    create.add_argument(
        "--ascii",
        "-a",
        action="store_true",
        help="Use espeak's ascii phoneme names (requires --backend espeak)",
    )
    create.add_argument(
        "--backend",
        "-b",
        type=str,
        default=cfg.default_transcriber(),
        help=f"Transcription backend (default: {cfg.default_transcriber()})",
    )
    create.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Set output file (default: stdout)",
    )
    create.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Set input file (default: stdin)",
    )
    create.set_defaults(func=run_create_dict, subparser=create)

    # find
    find = commands.add_parser(
        "find",
        parents=[common],
        help="Find words with similar pronunciations",
        description="Find words with similar pronunciations.",
    )
    find.add_argument(
        "--normalize",
        "-n",
        action="store_true",
        default=cfg.default_normalize(),
        help="Normalize word transcriptions",
    )
    find.add_argument(
        "--min-length",
        "-l",
        type=_non_negative_int,
        default=cfg.default_min_length(),
        help="Set minimum word length (default: none)",
    )
    find.add_argument(
        "--max-length",
        "-L",
        type=_non_negative_int,
        default=cfg.default_max_length(),
        help="Set maximum word length (default: none)",
    )
    find.add_argument(
        "--max-distance",
        "-d",
        type=_non_negative_int,
        default=cfg.default_max_distance(),
        help=(
            "Set max levenshtein distance between word transcriptions "
            f"(default: {cfg.default_max_distance()})"
        ),
    )
    find.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Dictionary files (tsv) (max: 2) (default: stdin)",
    )
    find.set_defaults(func=run_find, subparser=find)

    # merge
    merge = commands.add_parser(
        "merge",
        parents=[common],
        help="Merge results from find",
        description="Merge results from find.",
    )
    merge.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Files to merge (default: stdin)",
    )
    merge.set_defaults(func=run_merge, subparser=merge)

    return parser


def list_languages(transcriber: Transcriber) -> None:
    """Print the languages a transcriber supports."""
    languages = transcriber.available_languages()
    if not languages:
        logger.warning("no supported languages found")

    width = max([8] + [len(code) for code in languages])
    print("Languages:")
    for code, name in languages.items():
        print(f"  {code:<{width}} {name}")


def _resolve_language(
    args: argparse.Namespace,
    transcriber: Transcriber,
    lines: Iterator[str],
) -> tuple[str, list[str]]:
    """Pick the transcription language.

    Returns:
        (language, lines consumed from input while detecting it).
    """
    if args.voice:
        return args.voice, []

    consumed: list[str] = []
    language = args.language
    if language is None:
        logger.info("Detecting language...")
        detected = detect_stream_language(lines)
        language, consumed = detected.language, detected.consumed
        logger.info("Detected language %s", language)

    if not transcriber.supports_language(language):
        raise ValueError(f"No {transcriber.name} voice found for language {language!r}")
    return language, consumed


def run_create_dict(args: argparse.Namespace) -> int:
    """Transcribe a word list into a word<TAB>phonemes dictionary."""
    if args.ascii and args.backend != EspeakTranscriber.name:
        args.subparser.error("--ascii requires --backend espeak")

    if args.ascii:
        transcriber: Transcriber = EspeakTranscriber(ascii=True)
    else:
        transcriber = get_transcriber(args.backend)

    if args.list_languages:
        list_languages(transcriber)
        return 0

    with open_input(args.input) as src, open_output(args.output) as out:
        lines = iter(src)
        language, consumed = _resolve_language(args, transcriber, lines)

        written = 0
        for word, _ in PlainTextIngestor().parse(chain(consumed, lines)):
            phonemes = transcriber.transcribe(word, language)
            if not phonemes:
                logger.warning("no phonemes found for %r", word)
                continue
            out.write(f"{word}\t{phonemes}\n")
            written += 1

    logger.info("%d words transcribed", written)
    return 0


def run_find(args: argparse.Namespace) -> int:
    """Group words from one or two dictionaries by pronunciation."""
    if len(args.files) > 2:
        args.subparser.error("too many file arguments (max: 2)")

    ingestor = TsvIngestor(min_length=args.min_length, max_length=args.max_length)
    paths: list[Optional[Path]] = list(args.files) or [None]
    dicts = [ingestor.load(path) for path in paths]
    if args.normalize:
        for d in dicts:
            d.normalize()

    dictionary = dicts[0]
    other = dicts[1] if len(dicts) > 1 else None

    if args.max_distance == 0:
        if other is not None:
            groups = WordGroups.from_dicts(dictionary, other)
        else:
            groups = WordGroups.from_dict(dictionary)
        groups.write(sys.stdout)
        result_count = len(groups)
    else:
        result_count = 0
        search_in = other if other is not None else dictionary
        for group in find_similar_groups(dictionary, search_in, args.max_distance):
            print(" ".join(str(w) for w in group))
            result_count += 1

    print(f"{result_count} results", file=sys.stderr)
    return 0


def run_merge(args: argparse.Namespace) -> int:
    """Merge group files into maximal groups."""
    groups = merge_group_files(args.files)
    groups.write(sys.stdout)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg.configure_logging(args.verbose)

    try:
        return args.func(args)
    except (ValueError, OSError) as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 1


def _run_command(command: str, argv: Optional[list[str]]) -> int:
    if argv is None:
        argv = sys.argv[1:]
    return main([command, *argv])


def create_ipa_dict(argv: Optional[list[str]] = None) -> int:
    """Entry point for create-ipa-dict."""
    return _run_command("create-dict", argv)


def find_similar_words(argv: Optional[list[str]] = None) -> int:
    """Entry point for find-similar-words."""
    return _run_command("find", argv)


def merge_word_groups(argv: Optional[list[str]] = None) -> int:
    """Entry point for merge-word-groups."""
    return _run_command("merge", argv)


if __name__ == "__main__":
    sys.exit(main())
