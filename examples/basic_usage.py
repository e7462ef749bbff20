#!/usr/bin/env python3
"""
Basic clean_documenter Usage Example

This example demonstrates the core workflow:
1. Highlight misspellings in a document's comments
2. Show hover text and quick fixes for a diagnostic
3. Ignore words for the session
4. Auto-correct every comment in one transaction
"""

from pathlib import Path

from clean_documenter import SpellcheckConfig, SpellcheckSession, TextDocument

SOURCE = """\
// Calcualte the totl price of an order.
function totalPrice(items) {
  /* Each item carries a quantitiy and a unit price.
     sumPrices(items) does the actual work. */
  return sumPrices(items);
}
"""


def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Highlight
    # ─────────────────────────────────────────────────────────────────────────

    # Built-in English word list; pass affix_path/dictionary_path to use
    # Hunspell files instead, e.g. dictionaries/en_US/en_US.{aff,dic}
    aff = Path("dictionaries/en_US/en_US.aff")
    dic = Path("dictionaries/en_US/en_US.dic")
    if aff.exists() and dic.exists():
        config = SpellcheckConfig(affix_path=aff, dictionary_path=dic)
    else:
        config = SpellcheckConfig(max_suggestions=3)

    session = SpellcheckSession(config)
    doc = TextDocument("file:///src/order.js", SOURCE, "javascript")

    result = session.highlight_misspellings(doc)
    print(f"Scanned {result.comments_scanned} comments")
    for entry in result.diagnostics:
        span = doc.range_of(entry)
        print(
            f"  {span.start.line + 1}:{span.start.character + 1} "
            f"{doc.get_text(entry.range_start, entry.range_end)!r} - {entry.message}"
        )

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Quick fixes
    # ─────────────────────────────────────────────────────────────────────────

    if result.diagnostics:
        first = result.diagnostics[0]
        print(f"\nQuick fixes for {first.code!r}:")
        for action in session.code_actions(doc, [first]):
            print(f"  - {action.title}")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Ignore a word for this session
    # ─────────────────────────────────────────────────────────────────────────

    if result.diagnostics:
        last = result.diagnostics[-1]
        session.ignore_word(doc.uri, last, last.code)
        print(f"\nIgnored {last.code!r}; {len(session.diagnostics.get(doc.uri))} diagnostics left")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Auto-correct
    # ─────────────────────────────────────────────────────────────────────────

    correction = session.auto_correct(doc)
    print(f"\n{len(correction.edits)} comment edits:")
    print(correction.corrected_text)


if __name__ == "__main__":
    main()
