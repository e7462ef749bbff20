"""
Misspelling detection for comment text.

A token is flagged only when it survives every exclusion:
1. the raw token is a known identifier (declared name or call expression)
2. its cleaned form is shorter than the minimum word length
3. its cleaned form is a known identifier
4. its cleaned form was ignored for this session
5. the dictionary accepts the cleaned form

Call expressions from the identifier set that appear verbatim in a comment
are masked before tokenizing, so their name and arguments are excluded
together even when the call spans several tokens (e.g. `doThing(x, y)`).

Records keep the order of the comment text and are not deduplicated: two
occurrences of the same word produce two records.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection, Container

from clean_documenter.config import DEFAULT_MIN_WORD_LENGTH
from clean_documenter.extractors.identifiers import is_call_expression
from clean_documenter.models import DetectionStats, MisspellingRecord
from clean_documenter.spelling.dictionary import SpellingDictionary
from clean_documenter.spelling.tokenizer import clean_word, tokenize

logger = logging.getLogger(__name__)


def mask_call_expressions(text: str, identifiers: Collection[str]) -> str:
    """
    Blank out call expressions that appear verbatim in comment text.

    A call only matches where it starts a word, so `log()` leaves
    `catalog()` alone. The masked text keeps its length so tokens that
    survive are still found at the same offsets.
    """
    calls = [token for token in identifiers if is_call_expression(token) and token in text]
    # Longest first so a call containing a shorter one is masked whole
    for call in sorted(calls, key=len, reverse=True):
        pattern = re.compile(r"(?<![\w$])" + re.escape(call))
        text = pattern.sub(lambda m: " " * len(m.group()), text)
    return text


class MisspellingDetector:
    """
    Detects misspelled words in comment text.

    Attributes:
        dictionary: SpellingDictionary used for checks and suggestions.
        min_word_length: Cleaned words shorter than this are never flagged.

    Example:
        >>> detector = MisspellingDetector(dictionary)
        >>> detector.detect("// This is a tset", frozenset(), IgnoreStore())
        [MisspellingRecord(original='tset', cleaned='tset', suggestions=('test', 'set'))]
    """

    def __init__(
        self,
        dictionary: SpellingDictionary,
        min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
    ):
        self.dictionary = dictionary
        self.min_word_length = min_word_length

    def detect(
        self,
        text: str,
        identifiers: Collection[str],
        ignored: Container[str],
    ) -> list[MisspellingRecord]:
        """
        Detect misspellings in one comment.

        Args:
            text: Comment text, delimiters included.
            identifiers: Identifier exclusion set for the document.
            ignored: Cleaned words ignored for this session.

        Returns:
            MisspellingRecord per flagged token, in text order.
        """
        records, _ = self.detect_with_stats(text, identifiers, ignored)
        return records

    def detect_with_stats(
        self,
        text: str,
        identifiers: Collection[str],
        ignored: Container[str],
    ) -> tuple[list[MisspellingRecord], DetectionStats]:
        """
        Detect misspellings and return statistics.

        Raises:
            ValueError: If text is None.
        """
        if text is None:
            raise ValueError("Input text cannot be None")

        stats = DetectionStats()
        records = []

        for token in tokenize(mask_call_expressions(text, identifiers)):
            stats.tokens_checked += 1

            # Identifiers win even before cleaning
            if token in identifiers:
                stats.skipped_identifier += 1
                continue

            cleaned = clean_word(token)
            if len(cleaned) < self.min_word_length:
                stats.skipped_short += 1
                continue

            # Fallback for tokens carrying punctuation the identifier match lacked
            if cleaned in identifiers:
                stats.skipped_identifier += 1
                continue

            if cleaned in ignored:
                stats.skipped_ignored += 1
                continue

            if self.dictionary.check(cleaned):
                stats.skipped_valid += 1
                continue

            suggestions = tuple(self.dictionary.suggest(cleaned))
            records.append(MisspellingRecord(original=token, cleaned=cleaned, suggestions=suggestions))
            stats.misspellings_found += 1

        if records:
            logger.debug(
                "Found %d misspellings in comment: %s",
                len(records),
                ", ".join(r.cleaned for r in records),
            )
        return records, stats


def detect(
    text: str,
    identifiers: Collection[str],
    dictionary: SpellingDictionary,
    ignored: Container[str],
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
) -> list[MisspellingRecord]:
    """
    Detect misspellings in one comment.

    Convenience wrapper around MisspellingDetector.detect().

    Args:
        text: Comment text, delimiters included.
        identifiers: Identifier exclusion set for the document.
        dictionary: SpellingDictionary used for checks and suggestions.
        ignored: Cleaned words ignored for this session.
        min_word_length: Cleaned words shorter than this are never flagged.

    Returns:
        MisspellingRecord per flagged token, in text order.
    """
    return MisspellingDetector(dictionary, min_word_length).detect(text, identifiers, ignored)
