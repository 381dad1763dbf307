"""Line-based ingestion module.

Provides pluggable ingestors for the soundalike text formats:
- Plain text word lists (input for transcription)
- word<TAB>phonemes dictionaries
- Whitespace-separated word group files

Usage:
    from soundalike.ingest import tsv, groups

    dictionary = tsv.load_dictionary("path/to/dict.tsv")
    merged = groups.merge_group_files(["a.txt", "b.txt"])
"""

from .base import Ingestor, IngestResult, open_input, open_output
from . import groups
from . import plain_text
from . import tsv

__all__ = [
    "Ingestor",
    "IngestResult",
    "open_input",
    "open_output",
    "groups",
    "plain_text",
    "tsv",
]
