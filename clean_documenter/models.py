"""
Data models for clean_documenter.

These models are the plain data exchanged between the spellcheck core and
the host editor: comment spans found in a document, misspellings found in a
comment, the diagnostics projected back onto the document, and the text
edits produced by auto-correction and quick fixes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# =============================================================================
# ENUMS
# =============================================================================


class Severity(Enum):
    """Severity attached to a diagnostic when the host renders it."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    HINT = "hint"


class DocumentKind(Enum):
    """Document kinds whose comments can be spellchecked."""

    PLAINTEXT = "plaintext"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"

    @classmethod
    def from_language_id(cls, language_id: str) -> DocumentKind | None:
        """
        Map a host language identifier to a DocumentKind.

        Args:
            language_id: Language identifier reported by the host (e.g. "javascript").

        Returns:
            The matching DocumentKind, or None for unsupported languages.
        """
        try:
            return cls(language_id)
        except ValueError:
            return None


# =============================================================================
# SCAN MODELS
# =============================================================================


@dataclass(frozen=True)
class CommentSpan:
    """
    One lexical comment found in a document.

    `text` is the exact source substring including its delimiters and
    `start_offset` is the absolute offset of its first character.
    """

    text: str
    start_offset: int

    def __post_init__(self) -> None:
        if self.start_offset < 0:
            raise ValueError(f"start_offset must be >= 0, got {self.start_offset}")

    @property
    def end_offset(self) -> int:
        """Absolute offset just past the last character of the comment."""
        return self.start_offset + len(self.text)

    @property
    def kind(self) -> str:
        """Either "line" for // comments or "block" for /* */ comments."""
        return "line" if self.text.startswith("//") else "block"


@dataclass(frozen=True)
class MisspellingRecord:
    """A token in a comment that the dictionary does not know."""

    original: str  # Raw token, may carry punctuation
    cleaned: str  # Alphabetic-only lookup key
    suggestions: tuple[str, ...] = ()  # Best first

    @property
    def best_suggestion(self) -> str | None:
        """Top-ranked suggestion, or None when the dictionary has none."""
        return self.suggestions[0] if self.suggestions else None


@dataclass(frozen=True)
class DiagnosticEntry:
    """
    A flagged occurrence projected onto absolute document offsets.

    `code` carries the cleaned word so ignore and quick-fix actions can
    correlate back to the misspelling without rescanning.
    """

    range_start: int
    range_end: int
    message: str
    code: str
    severity: Severity = Severity.WARNING

    def __post_init__(self) -> None:
        if self.range_start < 0:
            raise ValueError(f"range_start must be >= 0, got {self.range_start}")
        if self.range_end < self.range_start:
            raise ValueError(
                f"range_end ({self.range_end}) must be >= range_start ({self.range_start})"
            )

    def __len__(self) -> int:
        return self.range_end - self.range_start


@dataclass(frozen=True)
class TextEdit:
    """Replacement of the absolute range [start, end) with new_text."""

    start: int
    end: int
    new_text: str

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")


# =============================================================================
# RESULT MODELS
# =============================================================================


@dataclass
class DetectionStats:
    """Statistics for misspelling detection."""

    tokens_checked: int = 0
    misspellings_found: int = 0
    skipped_identifier: int = 0
    skipped_short: int = 0
    skipped_ignored: int = 0
    skipped_valid: int = 0

    def merge(self, other: DetectionStats) -> None:
        """Accumulate another comment's statistics into this one."""
        self.tokens_checked += other.tokens_checked
        self.misspellings_found += other.misspellings_found
        self.skipped_identifier += other.skipped_identifier
        self.skipped_short += other.skipped_short
        self.skipped_ignored += other.skipped_ignored
        self.skipped_valid += other.skipped_valid


@dataclass
class ScanResult:
    """Result of one highlight pass over a document."""

    uri: str
    supported: bool
    diagnostics: list[DiagnosticEntry] = field(default_factory=list)
    comments_scanned: int = 0
    stats: DetectionStats = field(default_factory=DetectionStats)


@dataclass
class CorrectionResult:
    """Result of one auto-correct pass over a document."""

    uri: str
    supported: bool
    original_text: str = ""
    corrected_text: str = ""
    edits: list[TextEdit] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """True if any comment was rewritten."""
        return bool(self.edits)
