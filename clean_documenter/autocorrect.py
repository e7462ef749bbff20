"""
Comment-level auto-correction.

Every misspelled word with at least one suggestion is replaced by its top
suggestion. Replacements are made inside a copy of each comment and the
whole comment is emitted as one edit, so rewriting one word never shifts
the offsets of another edit. The edits for a document are meant to be
applied together as one transaction (see `apply_edits`).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection, Container

from clean_documenter.config import DEFAULT_MIN_WORD_LENGTH
from clean_documenter.exceptions import EditConflictError
from clean_documenter.extractors.comments import extract_comments
from clean_documenter.extractors.identifiers import extract_identifiers
from clean_documenter.models import CommentSpan, MisspellingRecord, TextEdit
from clean_documenter.spelling.detector import MisspellingDetector
from clean_documenter.spelling.dictionary import SpellingDictionary

logger = logging.getLogger(__name__)


def replace_whole_word(text: str, word: str, replacement: str) -> str:
    """Replace every case-sensitive whole-word occurrence of `word` with `replacement`."""
    pattern = re.compile(r"\b" + re.escape(word) + r"\b", re.ASCII)
    return pattern.sub(lambda _: replacement, text)


def correct_comment(comment: CommentSpan, records: list[MisspellingRecord]) -> TextEdit | None:
    """
    Rewrite one comment using the top suggestion of each record.

    Records without suggestions are left untouched.

    Args:
        comment: The comment to rewrite.
        records: Misspellings detected in the comment.

    Returns:
        A TextEdit spanning the whole original comment, or None if nothing changed.
    """
    updated = comment.text
    for record in records:
        if record.best_suggestion is not None:
            updated = replace_whole_word(updated, record.cleaned, record.best_suggestion)

    if updated == comment.text:
        return None
    return TextEdit(start=comment.start_offset, end=comment.end_offset, new_text=updated)


def auto_correct(
    text: str,
    identifiers: Collection[str] | None,
    dictionary: SpellingDictionary,
    ignored: Container[str],
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
) -> list[TextEdit]:
    """
    Compute the auto-correct edits for a whole document.

    Args:
        text: Full document text.
        identifiers: Identifier set; extracted from `text` when None.
        dictionary: SpellingDictionary used for checks and suggestions.
        ignored: Cleaned words ignored for this session.
        min_word_length: Cleaned words shorter than this are never flagged.

    Returns:
        At most one TextEdit per comment, in source order.
    """
    if identifiers is None:
        identifiers = extract_identifiers(text)

    detector = MisspellingDetector(dictionary, min_word_length)
    edits = []
    for comment in extract_comments(text):
        records = detector.detect(comment.text, identifiers, ignored)
        edit = correct_comment(comment, records)
        if edit is not None:
            edits.append(edit)

    logger.debug("Auto-correct produced %d comment edits", len(edits))
    return edits


def apply_edits(text: str, edits: list[TextEdit]) -> str:
    """
    Apply a batch of edits as one transaction.

    Every edit is validated before any is applied; if one is out of range
    or overlaps another, the whole batch is rejected.

    Raises:
        EditConflictError: If an edit is out of range or edits overlap.

    Example:
        >>> apply_edits("// teh end", [TextEdit(3, 6, "the")])
        '// the end'
    """
    ordered = sorted(edits, key=lambda e: (e.start, e.end))

    previous_end = 0
    for edit in ordered:
        if edit.end > len(text):
            raise EditConflictError(
                f"Edit [{edit.start}, {edit.end}) is outside text of length {len(text)}"
            )
        if edit.start < previous_end:
            raise EditConflictError(f"Edit [{edit.start}, {edit.end}) overlaps a previous edit")
        previous_end = edit.end

    parts = []
    cursor = 0
    for edit in ordered:
        parts.append(text[cursor : edit.start])
        parts.append(edit.new_text)
        cursor = edit.end
    parts.append(text[cursor:])
    return "".join(parts)
