"""
Session-scoped ignore list.

Words the user chose to ignore stay ignored until the owning session is
closed. There is no way to un-ignore a single word.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class IgnoreStore:
    """
    Monotonic set of cleaned words to skip during detection.

    Example:
        >>> store = IgnoreStore()
        >>> store.ignore("frobnicate")
        True
        >>> store.ignore_all(["frobnicate", "grault"])
        1
        >>> "grault" in store
        True
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: set[str] = set()
        self.ignore_all(words)

    def ignore(self, word: str) -> bool:
        """
        Ignore a cleaned word for the rest of the session.

        Args:
            word: Cleaned word to ignore. Empty words are not stored.

        Returns:
            True if the word was newly added.
        """
        if not word or word in self._words:
            return False
        self._words.add(word)
        logger.info("Ignoring %r for this session", word)
        return True

    def ignore_all(self, words: Iterable[str]) -> int:
        """Ignore many words at once; returns how many were newly added."""
        return sum(1 for word in words if self.ignore(word))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"IgnoreStore({len(self._words)} words)"
