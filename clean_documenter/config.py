"""
Configuration for clean_documenter spellchecking.

All options have sensible defaults; create a config only if you need to
point at a Hunspell dictionary or tune detection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from clean_documenter.exceptions import ConfigurationError
from clean_documenter.models import DocumentKind, Severity

# Cleaned words shorter than this are never checked
DEFAULT_MIN_WORD_LENGTH = 3


@dataclass
class SpellcheckConfig:
    """
    Configuration for comment spellchecking.

    The dictionary is either the engine's built-in word list for `language`,
    or a Hunspell affix file plus word list for `locale` when both
    `affix_path` and `dictionary_path` are given.

    Example:
        >>> config = SpellcheckConfig(
        ...     affix_path=Path("dictionaries/en_US/en_US.aff"),
        ...     dictionary_path=Path("dictionaries/en_US/en_US.dic"),
        ... )
        >>> session = SpellcheckSession(config)
    """

    # Dictionary source
    language: str = "en"  # Built-in engine word list
    locale: str = "en_US"  # Locale of the Hunspell files
    affix_path: Path | None = None
    dictionary_path: Path | None = None
    edit_distance: int = 2  # Engine search depth for suggestions

    # Detection
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    max_suggestions: int | None = None  # None = keep every suggestion

    # Presentation
    severity: Severity = Severity.WARNING

    supported_kinds: frozenset[DocumentKind] = field(
        default_factory=lambda: frozenset(DocumentKind)
    )

    def __post_init__(self):
        """Validate configuration."""
        if self.affix_path is not None:
            self.affix_path = Path(self.affix_path)
        if self.dictionary_path is not None:
            self.dictionary_path = Path(self.dictionary_path)

        if (self.affix_path is None) != (self.dictionary_path is None):
            raise ConfigurationError(
                "affix_path and dictionary_path must be given together, "
                f"got affix_path={self.affix_path!r}, dictionary_path={self.dictionary_path!r}"
            )
        if self.min_word_length < 1:
            raise ConfigurationError(f"min_word_length must be >= 1, got {self.min_word_length}")
        if self.max_suggestions is not None and self.max_suggestions < 0:
            raise ConfigurationError(
                f"max_suggestions must be >= 0 or None, got {self.max_suggestions}"
            )
        if self.edit_distance not in (1, 2):
            raise ConfigurationError(f"edit_distance must be 1 or 2, got {self.edit_distance}")
        if not isinstance(self.severity, Severity):
            raise ConfigurationError(f"severity must be a Severity, got {self.severity!r}")

        self.supported_kinds = frozenset(self.supported_kinds)

    @property
    def uses_hunspell_files(self) -> bool:
        """True if the dictionary is loaded from an affix file and word list."""
        return self.affix_path is not None and self.dictionary_path is not None

    def is_supported(self, language_id: str) -> bool:
        """Check whether documents of this host language are spellchecked."""
        kind = DocumentKind.from_language_id(language_id)
        return kind is not None and kind in self.supported_kinds
