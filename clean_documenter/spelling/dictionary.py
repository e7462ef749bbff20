"""
Dictionary adapter for comment spellchecking.

The spellcheck core only needs two operations from a dictionary engine:
`check(word) -> bool` and `suggest(word) -> list[str]` (best first). This
module defines that interface, wraps pyspellchecker behind it, and provides
a once-only provider so the dictionary is loaded lazily on first use and
then shared for the rest of the session.

Two dictionary sources are supported:
- the engine's built-in word-frequency list for a language (default "en")
- a Hunspell affix file plus word list (`.aff` / `.dic`) for one locale;
  word-list entries are loaded into the engine with their affix flags
  stripped, the affix data itself is kept as an opaque blob
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from clean_documenter.config import SpellcheckConfig
from clean_documenter.exceptions import DictionaryLoadError

if TYPE_CHECKING:
    from spellchecker import SpellChecker

logger = logging.getLogger(__name__)


# =============================================================================
# INTERFACE
# =============================================================================


@runtime_checkable
class SpellingDictionary(Protocol):
    """Interface every dictionary engine must satisfy."""

    def check(self, word: str) -> bool:
        """Return True if the word is spelled correctly."""
        ...

    def suggest(self, word: str) -> list[str]:
        """Return ranked replacement suggestions, best first (possibly empty)."""
        ...


# =============================================================================
# PYSPELLCHECKER ADAPTER
# =============================================================================


@dataclass
class PySpellDictionary:
    """
    SpellingDictionary backed by pyspellchecker.

    Suggestions are the engine's edit-distance candidates ranked by word
    frequency (most frequent first), with ties broken alphabetically.

    Attributes:
        engine: The underlying SpellChecker instance.
        locale: Locale the word list belongs to.
        affix_data: Raw affix file contents when loaded from Hunspell files.
        max_suggestions: Optional cap on the number of suggestions returned.

    Example:
        >>> dictionary = PySpellDictionary.from_language("en")
        >>> dictionary.check("test")
        True
        >>> "test" in dictionary.suggest("tset")
        True
    """

    engine: SpellChecker
    locale: str = "en"
    affix_data: str = field(default="", repr=False)
    max_suggestions: int | None = None

    @classmethod
    def from_language(
        cls,
        language: str = "en",
        distance: int = 2,
        max_suggestions: int | None = None,
    ) -> PySpellDictionary:
        """
        Load the engine's built-in word list for a language.

        Raises:
            DictionaryLoadError: If the engine is missing or the language is unknown.
        """
        SpellCheckerClass = _import_engine()
        try:
            engine = SpellCheckerClass(language=language, distance=distance)
        except (ValueError, OSError) as e:
            raise DictionaryLoadError(f"Cannot load built-in dictionary for {language!r}: {e}") from e
        logger.info("Loaded built-in dictionary for %r", language)
        return cls(engine=engine, locale=language, max_suggestions=max_suggestions)

    @classmethod
    def from_hunspell_files(
        cls,
        affix_path: Path,
        dictionary_path: Path,
        locale: str = "en_US",
        distance: int = 2,
        max_suggestions: int | None = None,
    ) -> PySpellDictionary:
        """
        Load a dictionary from a Hunspell affix file and word list.

        Args:
            affix_path: Path to the `.aff` file.
            dictionary_path: Path to the `.dic` word list.
            locale: Locale of the files (e.g. "en_US").
            distance: Edit distance the engine searches for suggestions.
            max_suggestions: Optional cap on suggestions.

        Raises:
            DictionaryLoadError: If either file is missing, unreadable or holds no words.
        """
        affix_data = _read_text(affix_path, "affix file")
        words = parse_word_list(_read_text(dictionary_path, "word list"))
        if not words:
            raise DictionaryLoadError(f"Word list {dictionary_path} contains no words")

        SpellCheckerClass = _import_engine()
        engine = SpellCheckerClass(language=None, distance=distance)
        engine.word_frequency.load_words(words)
        logger.info(
            "Loaded %d words for %s from %s",
            len(words),
            locale,
            dictionary_path,
        )
        return cls(
            engine=engine,
            locale=locale,
            affix_data=affix_data,
            max_suggestions=max_suggestions,
        )

    def check(self, word: str) -> bool:
        """Return True if the engine knows the word (case-insensitive)."""
        return word in self.engine

    def suggest(self, word: str) -> list[str]:
        """Return candidates ranked by frequency, excluding the word itself."""
        candidates = self.engine.candidates(word) or set()
        lowered = word.lower()
        ranked = sorted(
            (c for c in candidates if c.lower() != lowered),
            key=lambda c: (-self.engine[c], c),
        )
        if self.max_suggestions is not None:
            ranked = ranked[: self.max_suggestions]
        return ranked

    def add_words(self, words: Iterable[str]) -> None:
        """Teach the engine additional words."""
        self.engine.word_frequency.load_words(list(words))


# =============================================================================
# LOADING HELPERS
# =============================================================================


def _import_engine() -> type[SpellChecker]:
    """Import the pyspellchecker engine class."""
    try:
        from spellchecker import SpellChecker
    except ImportError as e:
        raise DictionaryLoadError(
            "pyspellchecker is not installed; install it with `pip install pyspellchecker`"
        ) from e
    return SpellChecker


def _read_text(path: Path, description: str) -> str:
    """Read a dictionary file as UTF-8, mapping failures to DictionaryLoadError."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DictionaryLoadError(f"Missing {description}: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"Unreadable {description} {path}: {e}") from e


def parse_word_list(content: str) -> list[str]:
    """
    Parse the words out of a Hunspell `.dic` file.

    The first line holds an approximate word count and is skipped when
    numeric. Each entry is `word[/FLAGS][ morphology...]`; only `word` is kept.

    Example:
        >>> parse_word_list("3\\nhello/MS\\nworld\\ntest/SDG po:noun\\n")
        ['hello', 'world', 'test']
    """
    lines = content.splitlines()
    if lines and lines[0].strip().isdigit():
        lines = lines[1:]

    words = []
    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        word = entry.split()[0].split("/", 1)[0]
        if word:
            words.append(word)
    return words


def load_dictionary(config: SpellcheckConfig) -> PySpellDictionary:
    """Load the dictionary described by a config."""
    if config.uses_hunspell_files:
        return PySpellDictionary.from_hunspell_files(
            config.affix_path,
            config.dictionary_path,
            locale=config.locale,
            distance=config.edit_distance,
            max_suggestions=config.max_suggestions,
        )
    return PySpellDictionary.from_language(
        config.language,
        distance=config.edit_distance,
        max_suggestions=config.max_suggestions,
    )


# =============================================================================
# ONCE-ONLY PROVIDER
# =============================================================================


class DictionaryProvider:
    """
    Lazily loads one dictionary and hands out the same instance afterwards.

    A failed load is not cached: the error propagates to the caller and the
    next call tries again.

    Example:
        >>> provider = DictionaryProvider(SpellcheckConfig())
        >>> provider.is_loaded
        False
        >>> provider.get() is provider.get()
        True
    """

    def __init__(
        self,
        config: SpellcheckConfig | None = None,
        loader: Callable[[SpellcheckConfig], SpellingDictionary] | None = None,
    ) -> None:
        """
        Initialize the provider.

        Args:
            config: Spellcheck configuration describing the dictionary source.
            loader: Optional factory replacing `load_dictionary`.
        """
        self.config = config or SpellcheckConfig()
        self._loader = loader or load_dictionary
        self._dictionary: SpellingDictionary | None = None

    @classmethod
    def from_dictionary(cls, dictionary: SpellingDictionary) -> DictionaryProvider:
        """Wrap an already-loaded dictionary."""
        provider = cls()
        provider._dictionary = dictionary
        return provider

    @property
    def is_loaded(self) -> bool:
        """Check if the dictionary has been loaded."""
        return self._dictionary is not None

    def get(self) -> SpellingDictionary:
        """
        Return the dictionary, loading it on first use.

        Raises:
            DictionaryLoadError: If loading fails.
        """
        if self._dictionary is None:
            self._dictionary = self._loader(self.config)
        return self._dictionary
