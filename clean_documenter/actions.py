"""
Quick-fix actions offered for spelling diagnostics.

Actions are plain descriptors: a title, an optional TextEdit to apply and
an optional command name with arguments for the host to route back into
the session (see SpellcheckSession.execute_command).
"""

from __future__ import annotations

import logging
from collections.abc import Container
from dataclasses import dataclass, field
from typing import Any

from clean_documenter.diagnostics import is_spelling_message, parse_hover_message
from clean_documenter.models import DiagnosticEntry, TextEdit

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

QUICK_FIX = "quickfix"

COMMAND_HIGHLIGHT = "clean-documenter.highlightMisspellings"
COMMAND_AUTO_CORRECT = "clean-documenter.autoCorrectComments"
COMMAND_CLEAR_DIAGNOSTIC = "clean-documenter.clearDiagnostic"
COMMAND_IGNORE_WORD = "clean-documenter.ignoreWord"
COMMAND_IGNORE_ALL = "clean-documenter.ignoreAllMisspellings"

IGNORE_ALL_TITLE = "Ignore All Misspellings in Document (Session Only)"


# =============================================================================
# DATA STRUCTURES
# =============================================================================


@dataclass
class CodeAction:
    """A quick fix the host can show next to a diagnostic."""

    title: str
    kind: str = QUICK_FIX
    edit: TextEdit | None = None
    command: str | None = None
    arguments: tuple[Any, ...] = ()
    diagnostics: list[DiagnosticEntry] = field(default_factory=list)
    is_preferred: bool = False


# =============================================================================
# ACTION BUILDERS
# =============================================================================


def ignore_all_action(uri: str) -> CodeAction:
    """Action ignoring every misspelling currently reported for a document."""
    return CodeAction(
        title=IGNORE_ALL_TITLE,
        command=COMMAND_IGNORE_ALL,
        arguments=(uri,),
    )


def replace_actions(uri: str, entry: DiagnosticEntry) -> list[CodeAction]:
    """One preferred replace action per suggestion in the entry's message."""
    return [
        CodeAction(
            title=f'Replace with "{suggestion}"',
            edit=TextEdit(entry.range_start, entry.range_end, suggestion),
            command=COMMAND_CLEAR_DIAGNOSTIC,
            arguments=(uri, entry),
            diagnostics=[entry],
            is_preferred=True,
        )
        for suggestion in parse_hover_message(entry.message)
    ]


def ignore_word_action(uri: str, entry: DiagnosticEntry) -> CodeAction:
    """Action ignoring the entry's cleaned word for the session."""
    return CodeAction(
        title=f'Ignore "{entry.code}" (Session Only)',
        command=COMMAND_IGNORE_WORD,
        arguments=(uri, entry, entry.code),
        diagnostics=[entry],
    )


def build_code_actions(
    uri: str,
    entries: list[DiagnosticEntry],
    ignored: Container[str],
    has_diagnostics: bool,
) -> list[CodeAction]:
    """
    Build the quick fixes for diagnostics under the cursor.

    Args:
        uri: Document URI.
        entries: Diagnostics the host asks actions for.
        ignored: Cleaned words ignored for this session.
        has_diagnostics: Whether the document currently has spelling diagnostics.

    Returns:
        The ignore-all action (when the document has diagnostics) followed by,
        per spelling entry whose word is not ignored, its replace actions and
        its ignore action.
    """
    actions = []
    if has_diagnostics:
        actions.append(ignore_all_action(uri))

    for entry in entries:
        if not is_spelling_message(entry.message):
            continue
        if entry.code in ignored:
            logger.debug("Skipping quick fixes for ignored word %r", entry.code)
            continue
        actions.extend(replace_actions(uri, entry))
        actions.append(ignore_word_action(uri, entry))

    return actions
