"""Character-level cleanup of pasted report text.

Applied before tokenizing so that text copied from the game client, a
spreadsheet, or a chat window yields the same cells.  Only invisible or
whitespace-like characters are touched; visible characters in cell values
are never rewritten.
"""

from __future__ import annotations

_TRANSLATE = str.maketrans({
    "\u00a0": " ",    # NBSP → space
    "\u200b": None,   # ZWSP → remove
    "\u200c": None,   # ZWNJ → remove
    "\u200d": None,   # ZWJ → remove
    "\ufeff": None,   # BOM → remove
    "\u2060": None,   # Word Joiner → remove
})


def normalize_text(text: str) -> str:
    """Normalize pasted report text.

    Performs:
    1. NBSP → regular space
    2. Zero-width characters removed (ZWSP, ZWNJ, ZWJ, BOM, WJ)

    Tabs, line breaks and runs of spaces are kept: they carry the
    delimiter information the tokenizer relies on.
    """
    return text.translate(_TRANSLATE)
