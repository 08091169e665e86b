"""
Tests for lexicon.normalize module.
"""

from lexicon.normalize import clean_entries, clean_entry, count_letters, normalize_word


def test_normalize_word():
    assert normalize_word("  CaT \n") == "cat"
    assert normalize_word("   ") == ""


def test_clean_entry_strips_quotes():
    """Quotes are removed before trimming."""
    assert clean_entry(' "Apple" ') == "apple"
    assert clean_entry('"Ab"', lowercase=False) == "Ab"


def test_clean_entries_drops_empty():
    assert clean_entries(['"x"', '  ', '""', "Y"]) == ["x", "y"]


def test_count_letters():
    """Only alphabetic characters count."""
    assert count_letters("a1 b!c") == 3
    assert count_letters("") == 0
    assert count_letters("123 ?!") == 0
    assert count_letters("Hello World") == 10
