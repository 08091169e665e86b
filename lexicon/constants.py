"""Tunables for validation and challenge generation."""

from __future__ import annotations

# A challenge prefix must admit at least this many dictionary completions.
MIN_COMPLETIONS = 20

# Words shorter than this are never used as a source for a challenge prefix.
MIN_SOURCE_WORD_LENGTH = 2

# Default challenge prefix length.
DEFAULT_PREFIX_LENGTH = 2

# Upper bound on rejection-sampling attempts per generated prefix.
MAX_SAMPLE_ATTEMPTS = 1000

# JSON keys used by the content files.
WORDS_KEY = "words"
PREFIXES_KEY = "prefixes"
NSFW_KEY = "nsfw"
