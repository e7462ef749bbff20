"""
Spellcheck session orchestrator.

A SpellcheckSession ties the pieces together for one run of the host:
1. DictionaryProvider: loads the dictionary once, on first use
2. Comment/identifier extraction and MisspellingDetector: find misspellings
3. DiagnosticCollection: per-document diagnostics, replaced on every scan
4. IgnoreStore: words ignored until the session is closed
5. Auto-correct: one whole-comment edit per changed comment

Every entry point runs to completion synchronously. Documents whose
language is not supported are skipped without error.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from dataclasses import dataclass, field
from typing import Any

from clean_documenter.actions import (
    COMMAND_AUTO_CORRECT,
    COMMAND_CLEAR_DIAGNOSTIC,
    COMMAND_HIGHLIGHT,
    COMMAND_IGNORE_ALL,
    COMMAND_IGNORE_WORD,
    CodeAction,
    build_code_actions,
)
from clean_documenter.autocorrect import apply_edits, auto_correct
from clean_documenter.config import SpellcheckConfig
from clean_documenter.diagnostics import DiagnosticCollection, project
from clean_documenter.document import TextDocument
from clean_documenter.extractors.comments import extract_comments
from clean_documenter.extractors.identifiers import extract_identifiers
from clean_documenter.models import (
    CommentSpan,
    CorrectionResult,
    DetectionStats,
    DiagnosticEntry,
    MisspellingRecord,
    ScanResult,
)
from clean_documenter.spelling.detector import MisspellingDetector
from clean_documenter.spelling.dictionary import DictionaryProvider
from clean_documenter.spelling.ignore import IgnoreStore

logger = logging.getLogger(__name__)


@dataclass
class SpellcheckSession:
    """
    Owns the dictionary, ignore list and diagnostics for one host session.

    Attributes:
        config: Spellcheck configuration.
        provider: Once-only dictionary provider (built from config if omitted).
        ignored: Words ignored for the rest of the session.
        diagnostics: Current spelling diagnostics per document URI.

    Example:
        >>> session = SpellcheckSession()
        >>> doc = TextDocument("file:///a.js", "// This is a tset", "javascript")
        >>> result = session.highlight_misspellings(doc)
        >>> [d.code for d in result.diagnostics]
        ['tset']
        >>> session.auto_correct(doc).changed
        True
    """

    config: SpellcheckConfig = field(default_factory=SpellcheckConfig)
    provider: DictionaryProvider | None = None
    ignored: IgnoreStore = field(default_factory=IgnoreStore)
    diagnostics: DiagnosticCollection = field(default_factory=DiagnosticCollection)

    def __post_init__(self) -> None:
        """Initialize the dictionary provider."""
        if self.provider is None:
            self.provider = DictionaryProvider(self.config)

    # -------------------------------------------------------------------------
    # Detection
    # -------------------------------------------------------------------------

    def _detector(self) -> MisspellingDetector:
        return MisspellingDetector(self.provider.get(), self.config.min_word_length)

    def scan_text(
        self,
        text: str,
        identifiers: Collection[str] | None = None,
    ) -> tuple[list[tuple[CommentSpan, list[MisspellingRecord]]], DetectionStats]:
        """
        Detect misspellings in every comment of a text.

        Args:
            text: Full document text.
            identifiers: Identifier set; extracted from `text` when omitted.

        Returns:
            Tuple of ((comment, records) pairs in source order, aggregate stats).

        Raises:
            DictionaryLoadError: If the dictionary cannot be loaded.
        """
        detector = self._detector()
        if identifiers is None:
            identifiers = extract_identifiers(text)
        stats = DetectionStats()

        scanned = []
        for comment in extract_comments(text):
            records, comment_stats = detector.detect_with_stats(
                comment.text, identifiers, self.ignored
            )
            stats.merge(comment_stats)
            scanned.append((comment, records))
        return scanned, stats

    def highlight_misspellings(self, document: TextDocument) -> ScanResult:
        """
        Scan a document and replace its diagnostics.

        Returns:
            ScanResult; `supported` is False (and nothing changes) for
            unsupported document kinds.

        Raises:
            DictionaryLoadError: If the dictionary cannot be loaded. The
                document's previous diagnostics are left as they were.
        """
        if not self.config.is_supported(document.language_id):
            logger.info("Unsupported language for spellcheck: %s", document.language_id)
            return ScanResult(uri=document.uri, supported=False)

        identifiers = extract_identifiers(document.text)
        scanned, stats = self.scan_text(document.text, identifiers)
        entries: list[DiagnosticEntry] = []
        for comment, records in scanned:
            entries.extend(project(comment, records, self.config.severity, identifiers))

        self.diagnostics.set(document.uri, entries)
        logger.debug(
            "%s: %d comments, %d misspellings",
            document.uri,
            len(scanned),
            len(entries),
        )
        return ScanResult(
            uri=document.uri,
            supported=True,
            diagnostics=entries,
            comments_scanned=len(scanned),
            stats=stats,
        )

    def on_document_changed(self, document: TextDocument) -> ScanResult:
        """Rescan a document after the host reports an edit."""
        return self.highlight_misspellings(document)

    # -------------------------------------------------------------------------
    # Correction
    # -------------------------------------------------------------------------

    def auto_correct(self, document: TextDocument) -> CorrectionResult:
        """
        Compute whole-comment corrections for a document.

        The edits are returned for the host to apply as one transaction;
        `corrected_text` shows the result of applying them all.

        Raises:
            DictionaryLoadError: If the dictionary cannot be loaded.
        """
        if not self.config.is_supported(document.language_id):
            logger.info("Unsupported language for spellcheck: %s", document.language_id)
            return CorrectionResult(
                uri=document.uri,
                supported=False,
                original_text=document.text,
                corrected_text=document.text,
            )

        edits = auto_correct(
            document.text,
            extract_identifiers(document.text),
            self.provider.get(),
            self.ignored,
            self.config.min_word_length,
        )
        corrected = apply_edits(document.text, edits)

        logger.info("%s: auto-corrected %d comments", document.uri, len(edits))
        return CorrectionResult(
            uri=document.uri,
            supported=True,
            original_text=document.text,
            corrected_text=corrected,
            edits=edits,
        )

    # -------------------------------------------------------------------------
    # Ignoring and quick fixes
    # -------------------------------------------------------------------------

    def ignore_word(self, uri: str, entry: DiagnosticEntry | None, word: str) -> bool:
        """
        Ignore a word for the session and drop the diagnostic it came from.

        Returns:
            True if the word was newly ignored.
        """
        added = self.ignored.ignore(word)
        if entry is not None:
            self.diagnostics.remove(uri, entry)
        return added

    def ignore_all(self, uri: str) -> int:
        """
        Ignore every word currently flagged in a document.

        The document's diagnostics are cleared afterwards.

        Returns:
            Number of distinct words newly ignored.
        """
        entries = self.diagnostics.get(uri)
        if not entries:
            logger.info("No misspellings to ignore in %s", uri)
            return 0

        count = self.ignored.ignore_all(entry.code for entry in entries)
        self.diagnostics.delete(uri)
        logger.info("Ignored %d unique words for this session", count)
        return count

    def clear_diagnostic(self, uri: str, entry: DiagnosticEntry) -> bool:
        """Remove a single diagnostic, e.g. after its quick fix was applied."""
        return self.diagnostics.remove(uri, entry)

    def code_actions(
        self,
        document: TextDocument,
        entries: list[DiagnosticEntry] | None = None,
    ) -> list[CodeAction]:
        """
        Quick fixes for diagnostics in a document.

        Args:
            document: The document the host asks actions for.
            entries: Diagnostics under the cursor; all current ones when omitted.
        """
        current = self.diagnostics.get(document.uri)
        if entries is None:
            entries = current
        return build_code_actions(document.uri, entries, self.ignored, bool(current))

    def execute_command(self, command: str, *arguments: Any) -> Any:
        """
        Route a host command back into the session.

        Raises:
            ValueError: If the command is unknown.
        """
        handlers = {
            COMMAND_HIGHLIGHT: self.highlight_misspellings,
            COMMAND_AUTO_CORRECT: self.auto_correct,
            COMMAND_CLEAR_DIAGNOSTIC: self.clear_diagnostic,
            COMMAND_IGNORE_WORD: self.ignore_word,
            COMMAND_IGNORE_ALL: self.ignore_all,
        }
        if command not in handlers:
            raise ValueError(f"Unknown command: {command!r}")
        return handlers[command](*arguments)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """End the session: forget ignored words and all diagnostics."""
        self.ignored = IgnoreStore()
        self.diagnostics.clear()
        logger.debug("Spellcheck session closed")

    def get_info(self) -> dict[str, Any]:
        """Get session state information."""
        return {
            "dictionary_loaded": self.provider.is_loaded,
            "ignored_words": len(self.ignored),
            "diagnostics": len(self.diagnostics),
            "supported_kinds": sorted(kind.value for kind in self.config.supported_kinds),
        }
