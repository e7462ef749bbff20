"""Comment and identifier extraction from slash-style source text."""

from clean_documenter.extractors.comments import (
    COMMENT_PATTERN,
    extract_comments,
    remove_comments,
)
from clean_documenter.extractors.identifiers import (
    extract_calls,
    extract_declarations,
    extract_identifiers,
    is_call_expression,
)

__all__ = [
    # Comments
    "COMMENT_PATTERN",
    "extract_comments",
    "remove_comments",
    # Identifiers
    "extract_identifiers",
    "extract_declarations",
    "extract_calls",
    "is_call_expression",
]
