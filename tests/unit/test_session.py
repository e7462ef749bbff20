"""
Unit tests for SpellcheckSession, quick-fix actions and the host
document model.
"""

import pytest

from clean_documenter import (
    DictionaryLoadError,
    DictionaryProvider,
    SpellcheckConfig,
    SpellcheckSession,
    TextDocument,
)
from clean_documenter.actions import (
    COMMAND_CLEAR_DIAGNOSTIC,
    COMMAND_IGNORE_ALL,
    COMMAND_IGNORE_WORD,
    IGNORE_ALL_TITLE,
    build_code_actions,
)
from clean_documenter.autocorrect import apply_edits
from clean_documenter.document import Position, Range
from clean_documenter.models import DiagnosticEntry, Severity

URI = "file:///src/app.js"


@pytest.fixture
def session(fake_dictionary):
    """Create a session over the fake dictionary."""
    return SpellcheckSession(provider=DictionaryProvider.from_dictionary(fake_dictionary))


def js(text: str, uri: str = URI) -> TextDocument:
    return TextDocument(uri, text, "javascript")


# =============================================================================
# Highlighting
# =============================================================================


class TestHighlightMisspellings:
    """Tests for SpellcheckSession.highlight_misspellings()."""

    def test_diagnostics_recorded(self, session):
        """Misspellings in comments become diagnostics for the document."""
        result = session.highlight_misspellings(js("let a;\n// This is a tset"))

        assert result.supported
        assert result.comments_scanned == 1
        assert [(d.range_start, d.range_end, d.code) for d in result.diagnostics] == [
            (20, 24, "tset")
        ]
        assert session.diagnostics.get(URI) == result.diagnostics

    def test_range_skips_restated_call(self, session):
        """A word also used inside a restated call is highlighted where it stands alone."""
        text = "foo(tset);\n// see foo(tset) tset"
        result = session.highlight_misspellings(js(text))

        assert [(d.range_start, d.range_end) for d in result.diagnostics] == [(28, 32)]

    def test_code_is_never_checked(self, session):
        """Only comment text is spellchecked."""
        result = session.highlight_misspellings(js("const tset = teh(qwzx);"))

        assert result.diagnostics == []

    def test_call_restated_in_comment(self, session):
        """A comment restating a call expression is not flagged."""
        text = "doThing(x, y);\n// calls doThing(x, y) correctly"

        assert session.highlight_misspellings(js(text)).diagnostics == []

    def test_rescan_replaces_diagnostics(self, session):
        """A rescan after an edit drops stale ranges."""
        doc = js("// tset and teh")
        assert len(session.highlight_misspellings(doc).diagnostics) == 2

        session.on_document_changed(doc.with_text("// test and teh"))

        assert [d.code for d in session.diagnostics.get(URI)] == ["teh"]

    def test_other_documents_untouched(self, session):
        """Scanning one document leaves other documents' diagnostics alone."""
        session.highlight_misspellings(js("// tset", uri="file:///a.js"))
        session.highlight_misspellings(js("// fine here", uri="file:///b.js"))

        assert len(session.diagnostics.get("file:///a.js")) == 1

    def test_unsupported_language_noop(self, session):
        """Unsupported kinds return supported=False and change nothing."""
        session.highlight_misspellings(js("// tset"))

        result = session.highlight_misspellings(TextDocument(URI, "# tset", "python"))

        assert not result.supported
        assert result.diagnostics == []
        assert len(session.diagnostics.get(URI)) == 1

    def test_plaintext_supported(self, session):
        """Plain text documents are scanned for slash comments too."""
        doc = TextDocument("file:///notes.txt", "intro\n// tset", "plaintext")

        assert len(session.highlight_misspellings(doc).diagnostics) == 1

    def test_configured_severity(self, fake_dictionary):
        """Diagnostics carry the configured severity."""
        session = SpellcheckSession(
            config=SpellcheckConfig(severity=Severity.INFORMATION),
            provider=DictionaryProvider.from_dictionary(fake_dictionary),
        )
        (entry,) = session.highlight_misspellings(js("// tset")).diagnostics

        assert entry.severity is Severity.INFORMATION

    def test_dictionary_failure_is_fatal(self):
        """A dictionary load failure fails the scan and keeps old diagnostics."""

        def loader(config):
            raise DictionaryLoadError("missing en_US.dic")

        session = SpellcheckSession(provider=DictionaryProvider(loader=loader))
        previous = [DiagnosticEntry(3, 7, "Suggestions: test", "tset")]
        session.diagnostics.set(URI, previous)

        with pytest.raises(DictionaryLoadError):
            session.highlight_misspellings(js("// tset"))
        assert session.diagnostics.get(URI) == previous

    def test_stats_aggregate_comments(self, session):
        """Statistics cover every comment in the document."""
        result = session.highlight_misspellings(js("// tset\n/* teh */"))

        assert result.stats.misspellings_found == 2
        assert result.comments_scanned == 2


# =============================================================================
# Auto-correct
# =============================================================================


class TestAutoCorrect:
    """Tests for SpellcheckSession.auto_correct()."""

    def test_scenario_rewrite(self, session):
        """'// This is a tset' becomes '// This is a test'."""
        result = session.auto_correct(js("// This is a tset"))

        assert result.supported
        assert result.changed
        assert result.corrected_text == "// This is a test"
        assert len(result.edits) == 1

    def test_one_edit_for_repeated_word(self, session):
        """Two occurrences in one comment are fixed by one edit."""
        result = session.auto_correct(js("// tset then tset"))

        assert len(result.edits) == 1
        assert result.corrected_text == "// test then test"

    def test_second_pass_is_noop(self, session):
        """Correcting corrected text produces no edits."""
        doc = js("// This is a tset\n/* teh parser */")
        corrected = session.auto_correct(doc).corrected_text

        assert not session.auto_correct(doc.with_text(corrected)).changed

    def test_round_trip_leaves_no_diagnostics(self, session):
        """Detection after correction finds nothing that had a suggestion."""
        doc = js("// tset then teh qwzx")
        corrected = session.auto_correct(doc).corrected_text

        result = session.highlight_misspellings(doc.with_text(corrected))

        assert [d.code for d in result.diagnostics] == ["qwzx"]

    def test_config_min_word_length_used(self, fake_dictionary):
        """The session passes its minimum word length through to correction."""
        session = SpellcheckSession(
            SpellcheckConfig(min_word_length=4),
            DictionaryProvider.from_dictionary(fake_dictionary),
        )

        assert session.auto_correct(js("// teh tset")).corrected_text == "// teh test"

    def test_unsupported_language_noop(self, session):
        """Unsupported kinds are returned unchanged."""
        result = session.auto_correct(TextDocument(URI, "// tset", "rust"))

        assert not result.supported
        assert result.edits == []
        assert result.corrected_text == "// tset"


# =============================================================================
# Ignoring
# =============================================================================


class TestIgnore:
    """Tests for ignore_word(), ignore_all() and clear_diagnostic()."""

    def test_ignore_word_removes_diagnostic(self, session):
        """Ignoring a word drops its diagnostic and future flags."""
        doc = js("// tset and teh")
        tset, teh = session.highlight_misspellings(doc).diagnostics

        assert session.ignore_word(URI, tset, tset.code)
        assert session.diagnostics.get(URI) == [teh]

        rescanned = session.highlight_misspellings(js("/* tset here */", uri="file:///b.js"))
        assert rescanned.diagnostics == []

    def test_ignore_all_counts_unique_words(self, session):
        """ignore_all counts distinct newly-ignored words and clears the document."""
        session.highlight_misspellings(js("// tset tset teh"))

        assert session.ignore_all(URI) == 2
        assert session.diagnostics.get(URI) == []

    def test_ignore_all_twice(self, session):
        """A second ignore_all on the rescanned document ignores nothing new."""
        doc = js("// tset teh")
        session.highlight_misspellings(doc)
        assert session.ignore_all(URI) == 2

        session.highlight_misspellings(doc)
        assert session.ignore_all(URI) == 0

    def test_ignore_all_without_diagnostics(self, session):
        """A document without diagnostics yields a count of 0."""
        assert session.ignore_all("file:///never-scanned.js") == 0

    def test_clear_diagnostic(self, session):
        """clear_diagnostic removes one entry without ignoring the word."""
        doc = js("// tset")
        (entry,) = session.highlight_misspellings(doc).diagnostics

        assert session.clear_diagnostic(URI, entry)
        assert "tset" not in session.ignored
        assert len(session.highlight_misspellings(doc).diagnostics) == 1

    def test_close_forgets_everything(self, session):
        """Closing the session ends the ignore list's lifetime."""
        session.highlight_misspellings(js("// tset"))
        session.ignore_all(URI)
        session.highlight_misspellings(js("// teh", uri="file:///b.js"))

        session.close()

        assert len(session.ignored) == 0
        assert len(session.diagnostics) == 0
        assert len(session.highlight_misspellings(js("// tset")).diagnostics) == 1


# =============================================================================
# Quick fixes and commands
# =============================================================================


class TestCodeActions:
    """Tests for quick-fix actions."""

    def test_actions_for_diagnostic(self, session):
        """Ignore-all, one replace per suggestion, then ignore-word."""
        doc = js("// This is a tset")
        session.highlight_misspellings(doc)

        actions = session.code_actions(doc)

        assert [a.title for a in actions] == [
            IGNORE_ALL_TITLE,
            'Replace with "test"',
            'Replace with "set"',
            'Ignore "tset" (Session Only)',
        ]
        assert actions[1].is_preferred
        assert actions[1].command == COMMAND_CLEAR_DIAGNOSTIC
        assert actions[3].command == COMMAND_IGNORE_WORD

    def test_replace_action_edit(self, session):
        """Applying a replace action's edit fixes the word in place."""
        doc = js("// This is a tset")
        session.highlight_misspellings(doc)
        replace = session.code_actions(doc)[1]

        assert apply_edits(doc.text, [replace.edit]) == "// This is a test"

    def test_no_replace_actions_without_suggestions(self, session):
        """Words without suggestions only offer ignore actions."""
        doc = js("// qwzx")
        session.highlight_misspellings(doc)

        titles = [a.title for a in session.code_actions(doc)]

        assert titles == [IGNORE_ALL_TITLE, 'Ignore "qwzx" (Session Only)']

    def test_ignored_word_has_no_actions(self, session):
        """Once ignored, a word offers no further quick fixes."""
        doc = js("// tset")
        (entry,) = session.highlight_misspellings(doc).diagnostics
        session.ignore_word(URI, entry, entry.code)

        assert session.code_actions(doc, [entry]) == []

    def test_foreign_diagnostics_skipped(self):
        """Diagnostics from other sources get no spelling actions."""
        foreign = DiagnosticEntry(0, 3, "Unexpected token", "E1")

        assert build_code_actions(URI, [foreign], set(), has_diagnostics=False) == []

    def test_execute_commands(self, session):
        """Host commands are routed to session operations."""
        doc = js("// tset teh")
        session.highlight_misspellings(doc)
        first = session.diagnostics.get(URI)[0]

        assert session.execute_command(COMMAND_CLEAR_DIAGNOSTIC, URI, first)
        assert session.execute_command(COMMAND_IGNORE_ALL, URI) == 1
        assert "teh" in session.ignored

    def test_unknown_command(self, session):
        with pytest.raises(ValueError, match="Unknown command"):
            session.execute_command("clean-documenter.nope")

    def test_get_info(self, session):
        info = session.get_info()

        assert info["dictionary_loaded"]
        assert info["supported_kinds"] == ["javascript", "plaintext", "typescript"]


# =============================================================================
# TextDocument
# =============================================================================


class TestTextDocument:
    """Tests for the host document model."""

    def test_position_at(self):
        """Offsets map to zero-based line/character positions."""
        doc = js("let a;\n// tset\n")

        assert doc.position_at(0) == Position(0, 0)
        assert doc.position_at(10) == Position(1, 3)
        assert doc.position_at(15) == Position(2, 0)

    def test_crlf_line_breaks(self):
        """CRLF counts as one line break."""
        doc = js("let a;\r\n// tset")

        assert doc.position_at(10) == Position(1, 2)
        assert doc.line_count == 2

    def test_offset_round_trip(self):
        """offset_at inverts position_at."""
        doc = js("a\nbc\r\ndef")
        for offset in range(len(doc.text) + 1):
            if doc.text[offset - 1 : offset + 1] == "\r\n":
                continue
            assert doc.offset_at(doc.position_at(offset)) == offset

    def test_out_of_range_clamped(self):
        """Offsets beyond the text are clamped."""
        doc = js("abc")

        assert doc.position_at(99) == Position(0, 3)
        assert doc.offset_at(Position(5, 0)) == 3

    def test_range_of_diagnostic(self, session):
        """Diagnostics translate to line/character ranges."""
        doc = js("let a;\n// This is a tset")
        (entry,) = session.highlight_misspellings(doc).diagnostics

        assert doc.range_of(entry) == Range(Position(1, 13), Position(1, 17))

    def test_with_text_bumps_version(self):
        doc = js("// a")
        updated = doc.with_text("// b")

        assert updated.version == doc.version + 1
        assert updated.uri == doc.uri
        assert updated.kind is not None
