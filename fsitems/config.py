"""Persistent JSON settings for file operations.

Stores the chunk size used when hashing and the text encoding used for
contents. All access is defensive: malformed or missing config falls back
to defaults.
"""

from __future__ import annotations

import codecs
import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "fsitems"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_HASH_CHUNK_SIZE = 64 * 1024
DEFAULT_TEXT_ENCODING = "utf-8"


@dataclass(frozen=True)
class Settings:
    """Resolved settings with every value validated."""

    hash_chunk_size: int = DEFAULT_HASH_CHUNK_SIZE
    text_encoding: str = DEFAULT_TEXT_ENCODING


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON, creating its folder."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def save_setting(key: str, value: object) -> None:
    """Persist one setting, keeping every other stored key."""
    config = load_config()
    config[key] = value
    save_config(config)


def _load_hash_chunk_size(data: dict[str, object]) -> int:
    """Read a positive chunk size; booleans and non-integers are invalid."""
    value = data.get("hash_chunk_size")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_HASH_CHUNK_SIZE
    return value


def _load_text_encoding(data: dict[str, object]) -> str:
    value = data.get("text_encoding")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_TEXT_ENCODING
    try:
        codecs.lookup(value.strip())
    except LookupError:
        return DEFAULT_TEXT_ENCODING
    return value.strip()


def load_settings() -> Settings:
    """Return validated settings from the persisted config.

    Unknown keys are ignored.
    """
    data = load_config()
    return Settings(
        hash_chunk_size=_load_hash_chunk_size(data),
        text_encoding=_load_text_encoding(data),
    )


__all__ = [
    "CONFIG_PATH",
    "Settings",
    "load_config",
    "save_config",
    "save_setting",
    "load_settings",
]
