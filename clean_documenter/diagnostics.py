"""
Projection of misspellings onto document diagnostics.

Each MisspellingRecord is located inside its comment and translated to
absolute document offsets. Diagnostics are owned per document and replaced
wholesale on every scan, so ranges from an earlier version of the text
never linger.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection, Iterator

from clean_documenter.models import CommentSpan, DiagnosticEntry, MisspellingRecord, Severity
from clean_documenter.spelling.detector import mask_call_expressions

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

SUGGESTIONS_PREFIX = "Suggestions: "
NO_SUGGESTIONS_MESSAGE = "No suggestions available."
SUGGESTION_SEPARATOR = ", "


# =============================================================================
# HOVER MESSAGES
# =============================================================================


def format_hover_message(suggestions: tuple[str, ...] | list[str]) -> str:
    """
    Build the hover text for a misspelling.

    Example:
        >>> format_hover_message(["test", "set"])
        'Suggestions: test, set'
        >>> format_hover_message([])
        'No suggestions available.'
    """
    if not suggestions:
        return NO_SUGGESTIONS_MESSAGE
    return SUGGESTIONS_PREFIX + SUGGESTION_SEPARATOR.join(suggestions)


def is_spelling_message(message: str) -> bool:
    """Check whether a diagnostic message was produced by format_hover_message."""
    return message.startswith(SUGGESTIONS_PREFIX) or message.startswith(NO_SUGGESTIONS_MESSAGE)


def parse_hover_message(message: str) -> list[str]:
    """Recover the suggestion list from a hover message."""
    if not message.startswith(SUGGESTIONS_PREFIX):
        return []
    body = message[len(SUGGESTIONS_PREFIX) :]
    return [s for s in body.split(SUGGESTION_SEPARATOR) if s.strip()]


# =============================================================================
# PROJECTION
# =============================================================================


def _find_token(text: str, token: str, start: int) -> int:
    """Find `token` at or after `start` where it stands as a whole token."""
    pattern = re.compile(r"(?<![^,\s.])" + re.escape(token) + r"(?![^,\s.])")
    match = pattern.search(text, start)
    return match.start() if match else -1


def project(
    comment: CommentSpan,
    records: list[MisspellingRecord],
    severity: Severity = Severity.WARNING,
    identifiers: Collection[str] = (),
) -> list[DiagnosticEntry]:
    """
    Map misspelling records to absolute document ranges.

    Each record's `original` token is searched for in the comment text as a
    whole token, so `tset` is never placed inside `atset`. The search is made
    in the same masked text detection tokenized, so a word that also appears
    inside an excluded call expression is placed on its own occurrence.
    Records are consumed in text order: each search starts after the previous
    match, so two occurrences of one word get two distinct ranges. Records
    whose token cannot be found are dropped.

    Args:
        comment: The comment the records were detected in.
        records: Records returned by detection, in text order.
        severity: Severity to attach to each entry.
        identifiers: Identifier set the records were detected with.

    Returns:
        One DiagnosticEntry per located record.
    """
    searchable = mask_call_expressions(comment.text, identifiers)
    entries = []
    cursor = 0

    for record in records:
        local = _find_token(searchable, record.original, cursor)
        if local < 0:
            logger.debug("Dropping %r: not found in comment at %d", record.original, comment.start_offset)
            continue
        cursor = local + len(record.original)

        start = comment.start_offset + local
        entries.append(
            DiagnosticEntry(
                range_start=start,
                range_end=start + len(record.original),
                message=format_hover_message(record.suggestions),
                code=record.cleaned,
                severity=severity,
            )
        )

    return entries


# =============================================================================
# DIAGNOSTIC COLLECTION
# =============================================================================


class DiagnosticCollection:
    """
    Per-document diagnostic store keyed by document URI.

    `set()` replaces a document's entries outright; there is no merging.

    Example:
        >>> collection = DiagnosticCollection("spellcheck")
        >>> collection.set("file:///a.js", entries)
        >>> collection.get("file:///a.js") == entries
        True
    """

    def __init__(self, name: str = "spellcheck") -> None:
        self.name = name
        self._entries: dict[str, tuple[DiagnosticEntry, ...]] = {}

    def set(self, uri: str, entries: list[DiagnosticEntry]) -> None:
        """Replace every diagnostic for a document."""
        self._entries[uri] = tuple(entries)

    def get(self, uri: str) -> list[DiagnosticEntry]:
        """Return a document's diagnostics (empty if none)."""
        return list(self._entries.get(uri, ()))

    def remove(self, uri: str, entry: DiagnosticEntry) -> bool:
        """
        Remove a single entry from a document.

        Returns:
            True if the entry was present.
        """
        existing = self._entries.get(uri)
        if not existing or entry not in existing:
            return False
        self._entries[uri] = tuple(e for e in existing if e != entry)
        return True

    def delete(self, uri: str) -> None:
        """Drop all diagnostics for one document."""
        self._entries.pop(uri, None)

    def clear(self) -> None:
        """Drop all diagnostics for every document."""
        self._entries.clear()

    def __contains__(self, uri: object) -> bool:
        return bool(self._entries.get(uri))  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[tuple[str, list[DiagnosticEntry]]]:
        for uri, entries in self._entries.items():
            yield uri, list(entries)

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._entries.values())
