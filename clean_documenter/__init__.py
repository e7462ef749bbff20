"""
clean_documenter: Spellcheck the comments of source code, not the code.

Comments are extracted from slash-style source text (`//` and `/* */`),
tokenized and checked against a dictionary. Declared names and call
expressions found in the surrounding code are never flagged, even when a
comment mentions them. Misspellings can be projected onto the document as
diagnostics, ignored for the session, or auto-corrected one comment at a
time.

Example:
    >>> import clean_documenter
    >>> session = clean_documenter.SpellcheckSession()
    >>> doc = clean_documenter.TextDocument("file:///a.js", "// recieve data", "javascript")
    >>> for entry in session.highlight_misspellings(doc).diagnostics:
    ...     print(entry.code)
    recieve
"""

from clean_documenter.actions import CodeAction, build_code_actions
from clean_documenter.autocorrect import apply_edits, auto_correct, correct_comment
from clean_documenter.config import SpellcheckConfig
from clean_documenter.diagnostics import (
    DiagnosticCollection,
    format_hover_message,
    parse_hover_message,
    project,
)
from clean_documenter.document import Position, Range, TextDocument
from clean_documenter.exceptions import (
    CleanDocumenterError,
    ConfigurationError,
    DictionaryLoadError,
    EditConflictError,
)
from clean_documenter.extractors import extract_comments, extract_identifiers, remove_comments
from clean_documenter.models import (
    CommentSpan,
    CorrectionResult,
    DetectionStats,
    DiagnosticEntry,
    DocumentKind,
    MisspellingRecord,
    ScanResult,
    Severity,
    TextEdit,
)
from clean_documenter.session import SpellcheckSession
from clean_documenter.spelling import (
    DictionaryProvider,
    IgnoreStore,
    MisspellingDetector,
    PySpellDictionary,
    SpellingDictionary,
    clean_word,
    detect,
    tokenize,
)

__version__ = "0.1.0"
__all__ = [
    # Session
    "SpellcheckSession",
    "SpellcheckConfig",
    # Extraction
    "extract_comments",
    "extract_identifiers",
    "remove_comments",
    # Spelling
    "tokenize",
    "clean_word",
    "detect",
    "MisspellingDetector",
    "SpellingDictionary",
    "PySpellDictionary",
    "DictionaryProvider",
    "IgnoreStore",
    # Diagnostics
    "project",
    "format_hover_message",
    "parse_hover_message",
    "DiagnosticCollection",
    # Correction
    "auto_correct",
    "correct_comment",
    "apply_edits",
    # Quick fixes
    "CodeAction",
    "build_code_actions",
    # Documents
    "TextDocument",
    "Position",
    "Range",
    # Models
    "CommentSpan",
    "MisspellingRecord",
    "DiagnosticEntry",
    "TextEdit",
    "Severity",
    "DocumentKind",
    "DetectionStats",
    "ScanResult",
    "CorrectionResult",
    # Exceptions
    "CleanDocumenterError",
    "DictionaryLoadError",
    "ConfigurationError",
    "EditConflictError",
]
