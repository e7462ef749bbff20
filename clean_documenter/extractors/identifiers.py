"""
Identifier extraction for comment spellchecking.

Comments often mention the code around them. To keep those mentions from
being flagged as misspellings, this module collects exclusion tokens from
the code itself (with comments removed):

- names introduced by `function`, `let`, `const`, `var` and `class`
- whole call expressions rendered as `name(args)`, so that a comment
  restating a call such as `doThing(x, y)` is excluded wholesale

Call arguments are captured up to the first `)`; nested calls are not
parsed.
"""

from __future__ import annotations

import logging
import re

from clean_documenter.extractors.comments import remove_comments

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

DECLARATION_KEYWORDS = ("function", "let", "const", "var", "class")

NAME = r"[a-zA-Z_$][\w$]*"

DECLARATION_PATTERN = re.compile(
    r"\b(?:" + "|".join(DECLARATION_KEYWORDS) + r")\s+(" + NAME + r")",
    re.ASCII,
)

CALL_PATTERN = re.compile(r"\b(" + NAME + r")\s*\(([^)]*?)\)", re.ASCII)


# =============================================================================
# EXTRACTION
# =============================================================================


def extract_declarations(code: str) -> set[str]:
    """Collect names following a declaration keyword."""
    return {match.group(1) for match in DECLARATION_PATTERN.finditer(code)}


def extract_calls(code: str) -> set[str]:
    """Collect call expressions rendered as `name(args)` with args verbatim."""
    return {f"{match.group(1)}({match.group(2)})" for match in CALL_PATTERN.finditer(code)}


def extract_identifiers(text: str) -> frozenset[str]:
    """
    Build the identifier exclusion set for a document.

    Args:
        text: Full document text, comments included.

    Returns:
        Frozen set of declared names and rendered call expressions.

    Example:
        >>> sorted(extract_identifiers("const total = sum(a, b); // sum(a, b) adds"))
        ['sum(a, b)', 'total']
    """
    code = remove_comments(text)
    identifiers = extract_declarations(code) | extract_calls(code)
    logger.debug("Extracted %d identifiers", len(identifiers))
    return frozenset(identifiers)


def is_call_expression(token: str) -> bool:
    """Check whether an identifier token is a rendered call expression."""
    return token.endswith(")") and "(" in token
