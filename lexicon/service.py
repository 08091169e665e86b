"""Lexicon service -- word validation, profanity filtering and challenge prefixes.

A :class:`Lexicon` owns two independent tries (dictionary and profanity)
and a list of curated prefixes.  It is filled once by :meth:`Lexicon.initialize`
and only read afterwards.

Gameplay code can either construct a ``Lexicon`` and pass it around, or use
the process-wide instance through :func:`initialize` / :func:`get_instance`.
"""

from __future__ import annotations

import logging
import random

from lexicon.constants import (
    DEFAULT_PREFIX_LENGTH,
    MAX_SAMPLE_ATTEMPTS,
    MIN_COMPLETIONS,
    MIN_SOURCE_WORD_LENGTH,
)
from lexicon.normalize import clean_entries, count_letters, normalize_word
from lexicon.trie import Trie

log = logging.getLogger("lexicon")


class Lexicon:
    """Dictionary + profanity corpus with validation and challenge generation."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self._dictionary = Trie()
        self._profanity = Trie()
        self._prefixes: list[str] = []
        self._initialized = False

    # lifecycle

    def initialize(self, words, prefixes, nsfw_words) -> bool:
        """Load the three content lists.  Returns False if already initialized.

        Dictionary words and profanity terms are quote-stripped, trimmed and
        lowercased; prefixes are quote-stripped and trimmed only.  Entries
        that end up empty are dropped.  Both tries are frozen afterwards.
        """
        if self._initialized:
            log.warning("Lexicon already initialized -- ignoring new content.")
            return False

        for word in clean_entries(words):
            self._dictionary.insert(word)
        for word in clean_entries(nsfw_words):
            self._profanity.insert(word)
        self._prefixes.extend(clean_entries(prefixes, lowercase=False))

        self._dictionary.freeze()
        self._profanity.freeze()
        self._initialized = True
        log.info(
            "Lexicon initialized: %s words, %s prefixes, %s filtered terms",
            f"{len(self._dictionary):,}", len(self._prefixes), len(self._profanity),
        )
        return True

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def dictionary(self) -> Trie:
        return self._dictionary

    @property
    def profanity(self) -> Trie:
        return self._profanity

    @property
    def prefixes(self) -> tuple[str, ...]:
        return tuple(self._prefixes)

    # validation

    def check_user_word(self, raw: str) -> bool:
        """True if the trimmed, lowercased input is a dictionary word."""
        word = normalize_word(raw)
        if not word:
            log.debug("Empty input after normalization: %r", raw)
            return False
        found = self._dictionary.search(word)
        log.debug("Dictionary lookup %r -> %s", word, found)
        return found

    def is_nsfw_word(self, raw: str) -> bool:
        """True if the trimmed, lowercased input is a filtered term."""
        word = normalize_word(raw)
        if not word:
            return False
        return self._profanity.search(word)

    @staticmethod
    def count_letters(word: str) -> int:
        return count_letters(word)

    # challenges

    def get_random_prefix(self) -> str:
        """Uniformly chosen curated prefix, or "" when none are loaded."""
        if not self._prefixes:
            log.error("No prefixes loaded!")
            return ""
        return self.rng.choice(self._prefixes)

    def check_prefix_has_minimum_words(self, prefix: str, min_count: int) -> bool:
        """True if at least ``min_count`` dictionary words start with ``prefix``.

        Scans the word collection and stops as soon as enough matches are seen.
        """
        if min_count <= 0:
            return True
        words = self._dictionary.all_words()
        if not words:
            log.error("No words available in the dictionary!")
            return False

        count = 0
        for word in words:
            if word.startswith(prefix):
                count += 1
                if count >= min_count:
                    return True
        return False

    def generate_prefix_from_random_word(
        self,
        length: int = DEFAULT_PREFIX_LENGTH,
        randomize: bool = False,
        min_words: int = MIN_COMPLETIONS,
        max_attempts: int = MAX_SAMPLE_ATTEMPTS,
    ) -> str:
        """Challenge prefix taken from a random dictionary word.

        Candidates are ``length`` characters long, or a random length in
        ``[1, length]`` when ``randomize`` is set, clamped to the source word.
        A candidate is accepted once at least ``min_words`` dictionary words
        start with it.  After ``max_attempts`` rejected draws the last
        candidate is returned as is.
        """
        if not len(self._dictionary):
            log.error("No words available in the dictionary!")
            return ""
        if length < 1:
            log.error("Prefix length must be at least 1, got %d", length)
            return ""

        candidate = ""
        for _ in range(max_attempts):
            word = self._dictionary.random_word(self.rng)
            if len(word) < MIN_SOURCE_WORD_LENGTH:
                continue
            size = self.rng.randint(1, length) if randomize else length
            candidate = word[:min(size, len(word))]
            if self.check_prefix_has_minimum_words(candidate, min_words):
                return candidate

        log.warning(
            "No prefix with %d completions after %d attempts -- using %r",
            min_words, max_attempts, candidate,
        )
        return candidate


# Process-wide instance

_instance: Lexicon | None = None


def initialize(words, prefixes, nsfw_words, rng: random.Random | None = None) -> Lexicon:
    """Create and fill the shared lexicon.  Later calls return it unchanged."""
    global _instance
    if _instance is not None:
        log.warning("Lexicon already initialized -- keeping the existing corpus.")
        return _instance
    lexicon = Lexicon(rng)
    lexicon.initialize(words, prefixes, nsfw_words)
    _instance = lexicon
    return _instance


def get_instance() -> Lexicon | None:
    """The shared lexicon, or None (with an error logged) before initialize()."""
    if _instance is None:
        log.error("Lexicon instance is not initialized!")
    return _instance
