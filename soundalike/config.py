"""Configuration loader for soundalike.

Command-line defaults come from the "defaults" object of a config.json,
layered over hardcoded fallbacks. The file is looked up in this order:

    1. $SOUNDALIKE_CONFIG
    2. config.json beside the soundalike package (project root)
    3. config.json in the current directory or its parent

Also sets up logging for the command-line tools.
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Iterator, Optional

# Hardcoded fallback defaults
FALLBACK_DEFAULTS: dict[str, Any] = {
    "transcriber": "phonemizer",
    "max_distance": 0,
    "normalize": False,
    "min_length": 0,
    "max_length": None,          # unbounded
    "detection_min_chars": 20,
    "detection_min_probability": 0.9,
    "verbose": False,
}

CONFIG_ENV = "SOUNDALIKE_CONFIG"
LOG_FORMAT = "%(levelname)s: %(message)s"

_config: Optional[dict[str, Any]] = None


def _candidate_paths() -> Iterator[Path]:
    env_path = os.getenv(CONFIG_ENV)
    if env_path:
        yield Path(env_path)
    yield Path(__file__).resolve().parent.parent / "config.json"
    yield Path.cwd() / "config.json"
    yield Path.cwd().parent / "config.json"


def _find_config() -> Optional[Path]:
    """Get the first existing config.json, if any."""
    return next((p for p in _candidate_paths() if p.is_file()), None)


def _read_defaults(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return data.get("defaults", {}) if isinstance(data, dict) else {}


def load() -> dict[str, Any]:
    """Load configuration once; later calls return the cached copy.

    An unreadable or malformed file is ignored and the fallbacks are used.
    """
    global _config
    if _config is None:
        defaults = dict(FALLBACK_DEFAULTS)
        path = _find_config()
        if path is not None:
            try:
                defaults.update(_read_defaults(path))
            except (json.JSONDecodeError, OSError):
                pass
        _config = {"defaults": defaults}
    return _config


def reset() -> None:
    """Forget the cached configuration so the next load() re-reads it."""
    global _config
    _config = None


def get_default(key: str, fallback: Any = None) -> Any:
    return load()["defaults"].get(key, fallback)


def configure_logging(verbose: bool = False) -> None:
    """Send soundalike log records to stderr.

    Warnings are always shown, progress messages only when verbose.
    Calling again replaces the previous handler.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("soundalike")
    logger.handlers = [handler]
    logger.setLevel(logging.INFO if verbose else logging.WARNING)


# Convenience accessors
def default_transcriber() -> str:
    return get_default("transcriber")


def default_max_distance() -> int:
    return get_default("max_distance")


def default_normalize() -> bool:
    return get_default("normalize")


def default_min_length() -> int:
    return get_default("min_length")


def default_max_length() -> Optional[int]:
    return get_default("max_length")


def default_detection_min_chars() -> int:
    return get_default("detection_min_chars")


def default_detection_min_probability() -> float:
    return get_default("detection_min_probability")


def default_verbose() -> bool:
    return get_default("verbose")
