"""
Shared fixtures for the lexicon tests.
"""

import random

import pytest

from lexicon import service
from lexicon.service import Lexicon


SCENARIO_WORDS = ["cat", "car", "cart", "dog"]

# 25 words starting with "ca" plus a handful that cannot reach 20 completions
CHALLENGE_WORDS = [f"ca{a}{b}" for a in "bdfgh" for b in "aeiou"] + [
    "dog", "dot", "emu", "fig", "a",
]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scenario_lexicon(rng):
    lexicon = Lexicon(rng)
    lexicon.initialize(SCENARIO_WORDS, ["ca", "do"], ["heck"])
    return lexicon


@pytest.fixture
def challenge_lexicon(rng):
    lexicon = Lexicon(rng)
    lexicon.initialize(CHALLENGE_WORDS, [], [])
    return lexicon


@pytest.fixture
def fresh_instance(monkeypatch):
    """Clear the process-wide lexicon for the duration of a test."""
    monkeypatch.setattr(service, "_instance", None)
