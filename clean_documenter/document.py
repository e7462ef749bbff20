"""
Minimal host document model.

Hosts hand the core a document's full text, a stable URI and its language
identifier. The core works in absolute character offsets; TextDocument
translates those to zero-based line/character positions for rendering.
"""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass, field

from clean_documenter.models import DiagnosticEntry, DocumentKind, TextEdit

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based line and character position."""

    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """Range between two positions, end exclusive."""

    start: Position
    end: Position


@dataclass
class TextDocument:
    """
    A snapshot of one open document.

    Example:
        >>> doc = TextDocument("file:///a.js", "let a;\\n// tset", "javascript")
        >>> doc.position_at(10)
        Position(line=1, character=3)
    """

    uri: str
    text: str
    language_id: str = DocumentKind.PLAINTEXT.value
    version: int = 0
    _line_starts: list[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._line_starts = [0] + [m.end() for m in LINE_BREAK_PATTERN.finditer(self.text)]

    @property
    def kind(self) -> DocumentKind | None:
        """DocumentKind for this document, or None if unsupported."""
        return DocumentKind.from_language_id(self.language_id)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def position_at(self, offset: int) -> Position:
        """Translate an absolute offset (clamped to the text) to a Position."""
        offset = max(0, min(offset, len(self.text)))
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return Position(line=line, character=offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        """Translate a Position back to an absolute offset (clamped to the text)."""
        if position.line < 0:
            return 0
        if position.line >= len(self._line_starts):
            return len(self.text)
        start = self._line_starts[position.line]
        return min(start + max(position.character, 0), len(self.text))

    def range_of(self, item: DiagnosticEntry | TextEdit) -> Range:
        """Line/character range covered by a diagnostic or an edit."""
        if isinstance(item, DiagnosticEntry):
            start, end = item.range_start, item.range_end
        else:
            start, end = item.start, item.end
        return Range(self.position_at(start), self.position_at(end))

    def get_text(self, start: int | None = None, end: int | None = None) -> str:
        """Return the document text, or a slice of it."""
        return self.text[start:end]

    def with_text(self, text: str) -> TextDocument:
        """New snapshot of this document with updated text and version."""
        return TextDocument(self.uri, text, self.language_id, self.version + 1)
