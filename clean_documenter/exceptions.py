"""
Exception classes for clean_documenter.

All clean_documenter exceptions inherit from CleanDocumenterError,
making it easy to catch all library errors.

Example:
    >>> try:
    ...     session.highlight_misspellings(document)
    ... except clean_documenter.DictionaryLoadError as e:
    ...     print(f"Spellcheck unavailable: {e}")
    ... except clean_documenter.CleanDocumenterError as e:
    ...     print(f"Spellcheck failed: {e}")
"""


class CleanDocumenterError(Exception):
    """
    Base exception for all clean_documenter errors.

    Catch this to handle any clean_documenter-specific error.
    """

    pass


class DictionaryLoadError(CleanDocumenterError):
    """
    Raised when the spelling dictionary cannot be loaded.

    Covers a missing engine, unreadable or corrupt affix/word-list files and
    unsupported locales. This is fatal for the scan that triggered the load:
    no partial results are produced with an unusable dictionary.
    """

    pass


class ConfigurationError(CleanDocumenterError, ValueError):
    """
    Raised for invalid configuration.

    Example:
        >>> SpellcheckConfig(min_word_length=0)
        ConfigurationError: min_word_length must be >= 1, got 0
    """

    pass


class EditConflictError(CleanDocumenterError):
    """
    Raised when a batch of text edits cannot be applied as one transaction.

    The batch is rejected before any edit is applied, so the text is never
    left half-rewritten.
    """

    pass
