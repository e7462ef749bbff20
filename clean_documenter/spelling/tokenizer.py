"""
Word tokenization and cleaning for comment text.

Tokens are split on runs of commas and whitespace, and every `.` is removed
from each token so that sentence punctuation is dropped without splitting
dotted words apart. Cleaning then reduces a token to its ASCII letters,
which is the key used for dictionary lookups and for the ignore set.
"""

from __future__ import annotations

import re

# =============================================================================
# CONSTANTS
# =============================================================================

TOKEN_SEPARATOR_PATTERN = re.compile(r"[,\s]+")
NON_ALPHA_PATTERN = re.compile(r"[^a-zA-Z]")


# =============================================================================
# TOKENIZATION
# =============================================================================


def tokenize(text: str) -> list[str]:
    """
    Split comment text into candidate words.

    Args:
        text: Comment text, delimiters included.

    Returns:
        Non-empty tokens in the order they appear.

    Example:
        >>> tokenize("// Fix the parser, then ship it.")
        ['//', 'Fix', 'the', 'parser', 'then', 'ship', 'it']
    """
    tokens = (token.replace(".", "") for token in TOKEN_SEPARATOR_PATTERN.split(text))
    return [token for token in tokens if token]


def clean_word(token: str) -> str:
    """Strip every non-alphabetic character from a token; the result may be empty."""
    return NON_ALPHA_PATTERN.sub("", token)
