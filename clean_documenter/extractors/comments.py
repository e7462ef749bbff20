"""
Comment extraction for slash-style source files.

Recognises `//` line comments (through end of line) and `/* */` block
comments (through the nearest following `*/`, possibly spanning lines).
String literals that merely contain comment delimiters are not understood
and will be reported as comments.
"""

from __future__ import annotations

import logging
import re

from clean_documenter.models import CommentSpan

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Line comment stops before any line terminator; block comment is non-greedy.
# An unterminated /* never matches, so text after it is not a comment.
COMMENT_PATTERN = re.compile(r"//[^\r\n]*|/\*[\s\S]*?\*/")


# =============================================================================
# EXTRACTION
# =============================================================================


def extract_comments(text: str) -> list[CommentSpan]:
    """
    Extract every comment from source text, in source order.

    Args:
        text: Full document text.

    Returns:
        Non-overlapping CommentSpan objects whose text includes the delimiters.

    Example:
        >>> extract_comments("let x = 1; // a note\\n/* block */")
        [CommentSpan(text='// a note', start_offset=11), CommentSpan(text='/* block */', start_offset=21)]
    """
    comments = [
        CommentSpan(text=match.group(0), start_offset=match.start())
        for match in COMMENT_PATTERN.finditer(text)
    ]
    logger.debug("Extracted %d comments from %d chars", len(comments), len(text))
    return comments


def remove_comments(text: str) -> str:
    """Delete all comment text, leaving code only (offsets are not preserved)."""
    return COMMENT_PATTERN.sub("", text)
