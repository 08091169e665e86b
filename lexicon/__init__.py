"""Lexicon -- trie-backed word validation and challenge prefixes."""

from lexicon.constants import MAX_SAMPLE_ATTEMPTS, MIN_COMPLETIONS
from lexicon.loader import Content, load_content, load_list
from lexicon.normalize import count_letters, normalize_word
from lexicon.service import Lexicon, get_instance, initialize
from lexicon.trie import Trie, TrieNode

__all__ = [
    "MAX_SAMPLE_ATTEMPTS",
    "MIN_COMPLETIONS",
    "Content",
    "Lexicon",
    "Trie",
    "TrieNode",
    "count_letters",
    "get_instance",
    "initialize",
    "load_content",
    "load_list",
    "normalize_word",
]
