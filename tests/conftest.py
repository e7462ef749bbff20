"""
Pytest configuration and fixtures for clean_documenter tests.
"""

from __future__ import annotations

import pytest

from clean_documenter import SpellcheckConfig


class FakeDictionary:
    """
    Deterministic SpellingDictionary for tests.

    Known words are matched case-insensitively; suggestions are looked up by
    exact word.
    """

    def __init__(self, words=(), suggestions=None):
        self.words = {w.lower() for w in words}
        self.suggestions = dict(suggestions or {})
        self.check_calls = []

    def check(self, word: str) -> bool:
        self.check_calls.append(word)
        return word.lower() in self.words

    def suggest(self, word: str) -> list[str]:
        return list(self.suggestions.get(word, []))


ENGLISH_WORDS = [
    "this",
    "test",
    "set",
    "then",
    "here",
    "calls",
    "correctly",
    "the",
    "parser",
    "returns",
    "value",
    "see",
    "and",
    "looks",
    "fine",
]


@pytest.fixture
def fake_dictionary() -> FakeDictionary:
    """A small dictionary where 'tset' suggests ['test', 'set']."""
    return FakeDictionary(ENGLISH_WORDS, {"tset": ["test", "set"], "teh": ["the"]})


@pytest.fixture(scope="session")
def sample_config() -> SpellcheckConfig:
    """Return a default SpellcheckConfig for testing."""
    return SpellcheckConfig()


@pytest.fixture
def make_dictionary():
    """Factory for FakeDictionary instances with custom words and suggestions."""
    return FakeDictionary
