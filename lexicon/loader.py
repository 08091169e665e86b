"""Content loader -- reads the word, prefix and filter lists from JSON files.

Each file holds one object with a single array of strings, e.g.
``{"words": ["cat", "car", ...]}``.  Entries are returned as found;
normalization happens in :meth:`lexicon.service.Lexicon.initialize`.
"""

from __future__ import annotations

import json
import logging
import os
from typing import NamedTuple

from lexicon.constants import NSFW_KEY, PREFIXES_KEY, WORDS_KEY

log = logging.getLogger("lexicon")


class Content(NamedTuple):
    words: list[str]
    prefixes: list[str]
    nsfw: list[str]


def load_list(path: str | None, key: str) -> list[str]:
    """String entries of the array stored under ``key`` in a JSON file.

    Problems with the file are logged and give an empty list.
    """
    if not path:
        return []
    if not os.path.exists(path):
        log.error("Could not open %s file: %s", key, path)
        return []

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        log.error("Could not read %s: %s", path, exc)
        return []

    if not isinstance(data, dict) or key not in data:
        log.error("Key %r not found in %s", key, path)
        return []
    items = data[key]
    if not isinstance(items, list):
        log.error("Invalid array format for key %r in %s", key, path)
        return []

    entries = [item for item in items if isinstance(item, str)]
    if len(entries) != len(items):
        log.warning("Skipped %d non-string entries under %r in %s",
                    len(items) - len(entries), key, path)
    log.info("Loaded %s %s from %s", f"{len(entries):,}", key, path)
    return entries


def load_content(
    words_path: str | None,
    prefixes_path: str | None,
    nsfw_path: str | None,
) -> Content:
    return Content(
        words=load_list(words_path, WORDS_KEY),
        prefixes=load_list(prefixes_path, PREFIXES_KEY),
        nsfw=load_list(nsfw_path, NSFW_KEY),
    )
