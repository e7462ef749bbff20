"""
Spellchecking for comment text.

- tokenize / clean_word: split comment text and derive lookup keys
- SpellingDictionary: check/suggest interface, backed by pyspellchecker
- DictionaryProvider: lazy, once-only dictionary loading
- MisspellingDetector: identifier-aware misspelling detection
- IgnoreStore: session-scoped ignored words

Example:
    >>> from clean_documenter.spelling import DictionaryProvider, MisspellingDetector
    >>> detector = MisspellingDetector(DictionaryProvider().get())
    >>> [r.cleaned for r in detector.detect("// teh parser", frozenset(), set())]
    ['teh']
"""

from clean_documenter.spelling.detector import (
    MisspellingDetector,
    detect,
    mask_call_expressions,
)
from clean_documenter.spelling.dictionary import (
    DictionaryProvider,
    PySpellDictionary,
    SpellingDictionary,
    load_dictionary,
    parse_word_list,
)
from clean_documenter.spelling.ignore import IgnoreStore
from clean_documenter.spelling.tokenizer import clean_word, tokenize

__all__ = [
    # Tokenizer
    "tokenize",
    "clean_word",
    # Dictionary
    "SpellingDictionary",
    "PySpellDictionary",
    "DictionaryProvider",
    "load_dictionary",
    "parse_word_list",
    # Detection
    "MisspellingDetector",
    "detect",
    "mask_call_expressions",
    # Ignore list
    "IgnoreStore",
]
