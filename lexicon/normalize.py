"""Text normalization helpers shared by the loader and the lexicon."""

from __future__ import annotations


def normalize_word(raw: str) -> str:
    """Trim surrounding whitespace and lowercase."""
    return raw.strip().lower()


def clean_entry(raw: str, lowercase: bool = True) -> str:
    """Sanitize one raw list entry: drop double quotes, trim, optionally lowercase.

    Content lists may still carry the quotes of the format they came from
    (``'"cat"'``), so quotes are removed anywhere in the entry, not only at
    the ends.
    """
    entry = raw.replace('"', "").strip()
    return entry.lower() if lowercase else entry


def clean_entries(raw_entries, lowercase: bool = True) -> list[str]:
    """Clean every entry and drop the ones that end up empty."""
    cleaned: list[str] = []
    for raw in raw_entries:
        entry = clean_entry(raw, lowercase=lowercase)
        if entry:
            cleaned.append(entry)
    return cleaned


def count_letters(word: str) -> int:
    """Number of alphabetic characters; digits, punctuation and spaces are ignored."""
    return sum(1 for ch in word if ch.isalpha())
